from xml.dom.minidom import parseString

from django.test import SimpleTestCase


class XmlTestingMixin(object):

    def assertXmlElementEquals(self, xml_str, value, element_path):
        doc = parseString(xml_str.encode('utf-8'))
        elements = element_path.split('.')
        parent = doc
        for element_name in elements:
            sub_elements = parent.getElementsByTagName(element_name)
            if len(sub_elements) == 0:
                self.fail("No element matching '%s' found using XML string '%s'" % (element_name, element_path))
                return
            parent = sub_elements[0]
        self.assertEqual(value, parent.firstChild.data)

    def assertXmlElementEmpty(self, xml_str, element_path):
        doc = parseString(xml_str.encode('utf-8'))
        parent = doc
        for element_name in element_path.split('.'):
            sub_elements = parent.getElementsByTagName(element_name)
            if len(sub_elements) == 0:
                self.fail("No element matching '%s' found" % element_name)
            parent = sub_elements[0]
        self.assertEqual([], parent.childNodes)

    def assertXmlElementMissing(self, xml_str, tag):
        doc = parseString(xml_str.encode('utf-8'))
        self.assertEqual([], doc.getElementsByTagName(tag))

    def child_tags(self, xml_str, tag):
        doc = parseString(xml_str.encode('utf-8'))
        parent = doc.getElementsByTagName(tag)[0]
        return [n.tagName for n in parent.childNodes
                if n.nodeType == n.ELEMENT_NODE]


class MockObject(object):
    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)


class MiscTests(SimpleTestCase):
    """
    Miscellaneous stuff:
    """

    def test_vanco_constant_exist(self):
        from vanco import VANCO
        self.assertEqual('Vanco', VANCO)
