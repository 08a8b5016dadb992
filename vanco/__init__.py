# Name used for the oscar payment source type
VANCO = 'Vanco'
