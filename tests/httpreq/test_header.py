import unittest

from http_message_signatures.structures import CaseInsensitiveDict

from httpreq import Header, HeaderMap


class TestHeaderMap(unittest.TestCase):
    def test_insert_and_get(self):
        header_map = HeaderMap()
        self.assertIsNone(header_map.insert("Accept", "text/html"))
        self.assertEqual(header_map.get("Accept"), "text/html")
        self.assertIsNone(header_map.get("Content-Type"))

    def test_insert_overwrites(self):
        header_map = HeaderMap()
        header_map.insert("Accept", "text/html")
        self.assertEqual(header_map.insert("Accept", "application/json"), "text/html")
        self.assertEqual(header_map["Accept"], "application/json")
        self.assertEqual(len(header_map), 1)

    def test_names_are_case_sensitive(self):
        header_map = HeaderMap()
        header_map.insert("Accept", "text/html")
        header_map.insert("accept", "application/json")
        self.assertEqual(len(header_map), 2)
        self.assertEqual(header_map.get("Accept"), "text/html")
        self.assertEqual(header_map.get("accept"), "application/json")
        self.assertIsNone(header_map.get("ACCEPT"))

    def test_get_key_value(self):
        header_map = HeaderMap({"Accept": "text/html"})
        self.assertEqual(header_map.get_key_value("Accept"), ("Accept", "text/html"))
        self.assertIsNone(header_map.get_key_value("Host"))

    def test_empty_value(self):
        header_map = HeaderMap([("X-Empty", "")])
        self.assertEqual(header_map.get_key_value("X-Empty"), ("X-Empty", ""))

    def test_from_pairs_later_pairs_overwrite(self):
        header_map = HeaderMap.from_pairs(
            [("A", "1"), ("B", "2"), ("A", "3")]
        )
        self.assertEqual(list(header_map.items()), [("A", "3"), ("B", "2")])

    def test_equality(self):
        self.assertEqual(HeaderMap([("A", "1"), ("B", "2")]), HeaderMap([("B", "2"), ("A", "1")]))
        self.assertEqual(HeaderMap({"A": "1"}), {"A": "1"})
        self.assertNotEqual(HeaderMap({"A": "1"}), HeaderMap({"a": "1"}))

    def test_copy_is_independent(self):
        header_map = HeaderMap({"A": "1"})
        other = header_map.copy()
        other.insert("B", "2")
        self.assertNotIn("B", header_map)

    def test_to_case_insensitive(self):
        header_map = HeaderMap({"Content-Type": "application/json"})
        headers = header_map.to_case_insensitive()
        self.assertIsInstance(headers, CaseInsensitiveDict)
        self.assertEqual(headers["content-type"], "application/json")


class TestHeader(unittest.TestCase):
    def test_default_is_empty(self):
        header = Header()
        self.assertEqual(len(header), 0)
        self.assertEqual(header.get_map(), HeaderMap())

    def test_conversion_is_lossless(self):
        header_map = HeaderMap([("Accept", "*/*"), ("Host", "example.com")])
        header = Header.from_map(header_map)
        self.assertEqual(header.get_map(), header_map)
        self.assertEqual(list(header.items()), list(header_map.items()))
        self.assertEqual(header.get_key_value("Host"), ("Host", "example.com"))

    def test_not_affected_by_source_map(self):
        header_map = HeaderMap({"Accept": "*/*"})
        header = Header.from_map(header_map)
        header_map.insert("Accept", "text/html")
        self.assertEqual(header["Accept"], "*/*")

    def test_not_affected_by_extracted_map(self):
        header = Header({"Accept": "*/*"})
        header.get_map().insert("Host", "example.com")
        self.assertNotIn("Host", header)

    def test_hashable(self):
        a = Header([("A", "1"), ("B", "2")])
        b = Header([("B", "2"), ("A", "1")])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
