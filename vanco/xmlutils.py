import datetime
import re
from xml.dom.minidom import Document, parseString


def render_value(value):
    """
    Return the text form of a leaf value
    """
    if isinstance(value, datetime.datetime):
        return value.strftime('%Y-%m-%d %H:%M:%S %z').strip()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return u"%s" % value


def create_element(doc, parent, tag, value=None):
    """
    Creates an XML element
    """
    ele = doc.createElement(tag)
    parent.appendChild(ele)
    if value is not None and value != '':
        text = doc.createTextNode(render_value(value))
        ele.appendChild(text)
    return ele


def add_elements(doc, parent, elements):
    """
    Append a declarative list of (tag, value) pairs to the parent element.

    A value that is a list is treated as the children of a container element;
    anything else is rendered as the element's text.
    """
    for tag, value in elements:
        if isinstance(value, list):
            container = create_element(doc, parent, tag)
            add_elements(doc, container, value)
        else:
            create_element(doc, parent, tag, value)


def build_document(root_tag, elements):
    """
    Render a complete XML document with a single root element wrapping the
    passed elements, in the order given.
    """
    doc = Document()
    root = create_element(doc, doc, root_tag)
    add_elements(doc, root, elements)
    return doc.toxml(encoding='UTF-8').decode('utf-8')


def prettify_xml(xml_str):
    xml_str = re.sub(r'\s*\n\s*', '', xml_str)
    ugly = parseString(xml_str.encode('utf8')).toprettyxml(indent='    ')
    regex = re.compile(r'>\n\s+([^<>\s].*?)\n\s+</', re.DOTALL)
    return regex.sub(r'>\g<1></', ugly)


# Parsing

def as_text(xml):
    """
    Text form of a document for logs and error messages
    """
    if isinstance(xml, bytes):
        return xml.decode('utf-8', 'replace')
    return xml


def child_elements(node):
    return [n for n in node.childNodes if n.nodeType == n.ELEMENT_NODE]


def element_text(node):
    parts = []
    for n in node.childNodes:
        if n.nodeType in (n.TEXT_NODE, n.CDATA_SECTION_NODE):
            parts.append(n.data)
        elif n.nodeType == n.ELEMENT_NODE:
            parts.append(element_text(n))
    return u''.join(parts)


def element_to_value(node):
    """
    Convert an element subtree into plain Python values.

    Leaves become their text (or None when empty), containers become a dict
    keyed by the child tag names as sent by the server.  Repeated sibling tags
    are collected into a list.
    """
    children = child_elements(node)
    if not children:
        text = element_text(node)
        return text if text.strip() else None
    data = {}
    for child in children:
        value = element_to_value(child)
        if child.tagName not in data:
            data[child.tagName] = value
        elif isinstance(data[child.tagName], list):
            data[child.tagName].append(value)
        else:
            data[child.tagName] = [data[child.tagName], value]
    return data


def _flatten_children(data, parent_tag, children):
    for child in children:
        grandchildren = child_elements(child)
        # <ResponseVars> inside <Response> only wraps the business fields
        if child.tagName == parent_tag + 'Vars' and grandchildren:
            _flatten_children(data, parent_tag, grandchildren)
            continue
        key = ('%s_%s' % (parent_tag, child.tagName)).lower()
        # First occurrence wins
        if key in data:
            continue
        if grandchildren:
            data[key] = element_to_value(child)
        else:
            data[key] = element_text(child)


def parse(response_xml):
    """
    Flatten a response document into a dict.

    Top-level leaves are keyed by their lower-cased tag.  Children of a
    top-level container are keyed by "parent_child" (lower-cased); when such
    a child has children of its own, its whole subtree is stored as the value.
    Malformed XML raises ``ExpatError``.

    Bytes are decoded using the document's declared encoding; text is taken
    as already decoded.
    """
    doc = parseString(response_xml)
    data = {}
    for node in child_elements(doc.documentElement):
        children = child_elements(node)
        if children:
            _flatten_children(data, node.tagName, children)
        else:
            data[node.tagName.lower()] = element_text(node)
    return data
