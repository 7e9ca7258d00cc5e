# Test methods with long descriptive names can omit docstrings
# pylint: disable=missing-docstring
import copy
import pickle
import unittest

import numpy as np

from datadonuts.util import hex_to_color
# pylint: disable=wildcard-import,unused-wildcard-import
from datadonuts.colorpalettes import *


class PaletteRegistryTest(unittest.TestCase):
    def test_builtin_palettes(self):
        self.assertEqual(sorted(MY_COLORS),
                         ["contrast_three", "ut_pop", "veronese"])
        self.assertEqual(MY_COLORS["contrast_three"],
                         ("#004488", "#BB5566", "#DDAA33"))
        self.assertEqual(len(MY_COLORS["veronese"]), 7)
        self.assertIs(my_colors, MY_COLORS)

    def test_missing_name(self):
        with self.assertRaises(PaletteNotFound) as cm:
            _ = MY_COLORS["nonexistent"]
        self.assertEqual(cm.exception.name, "nonexistent")
        self.assertIn("nonexistent", str(cm.exception))
        self.assertIsInstance(cm.exception, KeyError)
        self.assertIsNone(MY_COLORS.get("nonexistent"))
        self.assertNotIn("nonexistent", MY_COLORS)
        self.assertNotIn(["unhashable"], MY_COLORS)

    def test_is_read_only(self):
        registry = PaletteRegistry({"a": ["#000", "#fff"]})
        with self.assertRaises(TypeError):
            registry["b"] = ("#123456", )  # pylint: disable=unsupported-assignment-operation
        with self.assertRaises(TypeError):
            del registry["a"]  # pylint: disable=unsupported-delete-operation
        self.assertFalse(hasattr(registry, "update"))
        self.assertIsInstance(registry["a"], tuple)

    def test_copies_input(self):
        colors = ["#000", "#fff"]
        source = {"a": colors}
        registry = PaletteRegistry(source)
        colors.append("#f00")
        source["b"] = ["#0f0"]
        self.assertEqual(registry["a"], ("#000", "#fff"))
        self.assertNotIn("b", registry)

    def test_from_pairs_and_extension(self):
        registry = PaletteRegistry([("a", ["#000"])])
        self.assertEqual(registry["a"], ("#000", ))
        extended = PaletteRegistry({**MY_COLORS, "mine": ["#abc"]})
        self.assertEqual(len(extended), 4)
        self.assertEqual(len(MY_COLORS), 3)

    def test_invalid_palettes(self):
        self.assertRaises(ValueError, PaletteRegistry, {"empty": []})
        self.assertRaises(ValueError, PaletteRegistry, {"a": ["#000", ""]})
        self.assertRaises(ValueError, PaletteRegistry, {"a": ["#000", None]})
        self.assertRaises(TypeError, PaletteRegistry, {"a": "#000"})
        self.assertRaises(TypeError, PaletteRegistry, {1: ["#000"]})


class DiscreteResolveTest(unittest.TestCase):
    def test_contrast_three(self):
        self.assertEqual(
            list(resolve("contrast_three", "discrete", 3)),
            ["#004488", "#BB5566", "#DDAA33"])

    def test_prefix(self):
        for name, colors in MY_COLORS.items():
            for n in range(1, len(colors) + 1):
                self.assertEqual(resolve(name, "discrete", n), colors[:n])

    def test_default_count_is_identity(self):
        for name, colors in MY_COLORS.items():
            self.assertEqual(resolve(name, PaletteType.Discrete), colors)

    def test_count_exceeding_palette(self):
        with self.assertRaises(CountExceedsDiscretePalette) as cm:
            resolve("ut_pop", "discrete", 4)
        self.assertIsInstance(cm.exception, InvalidCount)
        self.assertEqual(cm.exception.count, 4)
        self.assertEqual(cm.exception.available, 3)
        self.assertIn("ut_pop", str(cm.exception))

    def test_does_not_interpolate_tokens(self):
        registry = {"named": ["hotpink", "steelblue"]}
        self.assertEqual(resolve("named", "discrete", registry=registry),
                         ("hotpink", "steelblue"))

    def test_numpy_integer_count(self):
        self.assertEqual(len(resolve("veronese", "discrete", np.int64(2))), 2)


class ContinuousResolveTest(unittest.TestCase):
    def test_ut_pop(self):
        colors = resolve("ut_pop", "continuous", 5)
        self.assertEqual(
            list(colors),
            ["#f8971f", "#7C7B52", "#005f86", "#00849E", "#00a9b7"])

    def test_endpoints(self):
        for name, colors in MY_COLORS.items():
            for n in (2, 3, 4, 10, 100):
                ramp = resolve(name, "continuous", n)
                self.assertEqual(len(ramp), n)
                self.assertEqual(ramp[0], colors[0])
                self.assertEqual(ramp[-1], colors[-1])

    def test_default_count_reproduces_controls(self):
        for name, colors in MY_COLORS.items():
            self.assertEqual(resolve(name, "continuous"), colors)

    def test_single_color(self):
        self.assertEqual(resolve("ut_pop", "continuous", 1), ("#f8971f", ))
        registry = {"one": ["#123"]}
        self.assertEqual(resolve("one", "continuous", 3, registry),
                         ("#123", ) * 3)

    def test_channels_are_truncated(self):
        bw = {"bw": ["#000000", "#FFFFFF"]}
        self.assertEqual(resolve("bw", "continuous", 3, bw)[1], "#7F7F7F")
        self.assertEqual(
            list(resolve("bw", "continuous", 5, bw)),
            ["#000000", "#3F3F3F", "#7F7F7F", "#BFBFBF", "#FFFFFF"])
        # 127.5 and 158.5 would round differently
        ramp = resolve("mix", "continuous", 3,
                       {"mix": ["#00FF00", "#FF3E00"]})
        self.assertEqual(ramp[1], "#7F9E00")

    def test_monotonic_between_two_colors(self):
        ramp = resolve("bw", "continuous", 11,
                       registry={"bw": ["#000000", "#FFFFFF"]})
        greys = [hex_to_color(color)[0] for color in ramp]
        self.assertEqual(greys, sorted(greys))
        self.assertEqual(len(set(greys)), 11)

    def test_more_and_fewer_than_controls(self):
        self.assertEqual(len(resolve("veronese", "continuous", 3)), 3)
        self.assertEqual(len(resolve("veronese", "continuous", 50)), 50)
        ramp = resolve("veronese", "continuous", 4)
        # 0, 2, 4 and 6 are control positions for 4 samples of 7 colors
        self.assertEqual(ramp, MY_COLORS["veronese"][::2])

    def test_deterministic(self):
        self.assertEqual(resolve("veronese", "continuous", 17),
                         resolve("veronese", "continuous", 17))

    def test_invalid_control_color(self):
        registry = {"named": ["#000", "hotpink"]}
        with self.assertRaises(InvalidColor) as cm:
            resolve("named", "continuous", 5, registry)
        self.assertEqual(cm.exception.color, "hotpink")
        self.assertEqual(cm.exception.name, "named")


class ResolveErrorsTest(unittest.TestCase):
    def test_not_found(self):
        with self.assertRaises(PaletteNotFound) as cm:
            resolve("nonexistent", "discrete", 1)
        self.assertEqual(cm.exception.name, "nonexistent")
        self.assertRaises(PaletteNotFound,
                          resolve, "ut_pop", "discrete", registry={})

    def test_invalid_mode(self):
        for mode in ("gradient", "Discrete", "", None, 1, ["discrete"]):
            with self.assertRaises(InvalidMode) as cm:
                resolve("ut_pop", mode)
            self.assertEqual(cm.exception.mode, mode)
            self.assertIsInstance(cm.exception, ValueError)

    def test_invalid_count(self):
        for mode in PaletteType:
            for count in (0, -1, 2.0, "3", True, False):
                with self.assertRaises(InvalidCount) as cm:
                    resolve("ut_pop", mode, count)
                self.assertEqual(cm.exception.count, count)
                self.assertNotIsInstance(cm.exception,
                                         CountExceedsDiscretePalette)

    def test_errors_share_base(self):
        for exc in (PaletteNotFound, InvalidMode, InvalidCount,
                    CountExceedsDiscretePalette, InvalidColor):
            self.assertTrue(issubclass(exc, PaletteError))


class PaletteTest(unittest.TestCase):
    def test_metadata(self):
        colors = my_palettes("ut_pop", "continuous", 4)
        self.assertEqual(colors.name, "ut_pop")
        self.assertIs(colors.kind, PaletteType.Continuous)
        discrete = my_palettes("ut_pop", "discrete")
        self.assertIs(discrete.kind, PaletteType.Discrete)

    def test_behaves_as_tuple(self):
        colors = resolve("contrast_three", "discrete")
        self.assertIsInstance(colors, tuple)
        self.assertEqual(colors[1:], ("#BB5566", "#DDAA33"))
        self.assertEqual(colors, ("#004488", "#BB5566", "#DDAA33"))

    def test_repr(self):
        self.assertEqual(
            repr(resolve("contrast_three", "discrete", 1)),
            "Palette('contrast_three', 'discrete', ('#004488',))")

    def test_pickle_and_copy(self):
        colors = resolve("ut_pop", "continuous", 4)
        for clone in (pickle.loads(pickle.dumps(colors)), copy.copy(colors)):
            self.assertEqual(clone, colors)
            self.assertEqual(clone.name, "ut_pop")
            self.assertIs(clone.kind, PaletteType.Continuous)


if __name__ == "__main__":
    unittest.main()
