import unittest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from map_adt import MapADT


class TestMapADT(unittest.TestCase):
    def test_cannot_instantiate_base(self):
        with self.assertRaises(TypeError):
            MapADT()

    def test_incomplete_subclass_rejected(self):
        class OnlyPut(MapADT):
            def put(self, key, value):
                pass

        with self.assertRaises(TypeError):
            OnlyPut()

    def test_complete_subclass_instantiates(self):
        class DictMap(MapADT):
            def __init__(self):
                self._d = {}

            def put(self, key, value):
                self._d[key] = value

            def contains_key(self, key):
                return key in self._d

            def get(self, key):
                return self._d[key]

            def remove(self, key):
                return self._d.pop(key)

            def clear(self):
                self._d.clear()

            def size(self):
                return len(self._d)

            def capacity(self):
                return len(self._d)

        m = DictMap()
        m.put("a", 1)
        self.assertTrue(m.contains_key("a"))
        self.assertEqual(m.remove("a"), 1)
        self.assertEqual(m.size(), 0)


if __name__ == "__main__":
    unittest.main()
