"""
Conversions module behavioral tests.

Scope
- Validate the built-in converters: bool spellings, automatic-base integers
  with trailing garbage, floating literals (decimal, exponent, hex, inf/nan).
- Validate arity and container/composite classification of target types.
- Validate fromstring() store/append semantics and failure isolation.
- Validate tostring() rendering of typed defaults.

Conventions
- Test method names follow CamelCase per project convention.
"""
import math
import sys
import unittest
from collections import deque
from unittest import TestCase

from argbind.conversions import *
from argbind.variables import Variable


class TestBoolConverter(TestCase):
    """Textual spellings accepted for presence-flags and bool values."""

    def testTruthySpellings(self):
        for token in ("1", "true", "yes", "enable", "TRUE", "Yes", "ENABLE"):
            with self.subTest(token=token):
                self.assertIs(parse_value(bool, token), True)

    def testFalsySpellings(self):
        for token in ("0", "false", "no", "disable", "False", "NO", "Disable"):
            with self.subTest(token=token):
                self.assertIs(parse_value(bool, token), False)

    def testUnknownSpellingRejected(self):
        for token in ("maybe", "", "2", "on"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    parse_value(bool, token)


class TestIntConverter(TestCase):
    """Leading-numeral integers with automatic base detection."""

    def testDecimal(self):
        self.assertEqual(parse_value(int, "42"), 42)
        self.assertEqual(parse_value(int, "-42"), -42)
        self.assertEqual(parse_value(int, "+7"), 7)

    def testHexadecimal(self):
        self.assertEqual(parse_value(int, "0x1f"), 31)
        self.assertEqual(parse_value(int, "0X1F"), 31)
        self.assertEqual(parse_value(int, "-0x10"), -16)

    def testOctal(self):
        self.assertEqual(parse_value(int, "017"), 15)
        self.assertEqual(parse_value(int, "0"), 0)

    def testTrailingGarbageIgnored(self):
        self.assertEqual(parse_value(int, "12abc"), 12)
        self.assertEqual(parse_value(int, "08"), 0)
        self.assertEqual(parse_value(int, "0x"), 0)

    def testLeadingWhitespaceSkipped(self):
        self.assertEqual(parse_value(int, "  \t9"), 9)

    def testNoDigitsRejected(self):
        for token in ("abc", "", "-", "x12", " "):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    parse_value(int, token)

    def testLargeValuesKeepPrecision(self):
        self.assertEqual(parse_value(int, "123456789012345678901234567890"), 123456789012345678901234567890)

    def testDecimalBeyondDigitLimitRejected(self):
        if not sys.get_int_max_str_digits():
            self.skipTest("integer string conversion limit disabled")
        digits = "1" * (sys.get_int_max_str_digits() + 1)
        with self.assertRaises(ValueError):
            parse_value(int, digits)

    def testHexadecimalHasNoDigitLimit(self):
        digits = "f" * (max(sys.get_int_max_str_digits(), 4300) + 1)
        self.assertEqual(parse_value(int, "0x" + digits), int(digits, 16))


class TestFloatConverter(TestCase):
    """Leading floating literals."""

    def testDecimalForms(self):
        self.assertEqual(parse_value(float, "1.5"), 1.5)
        self.assertEqual(parse_value(float, ".5"), 0.5)
        self.assertEqual(parse_value(float, "5."), 5.0)
        self.assertEqual(parse_value(float, "-2"), -2.0)

    def testExponentAndGarbage(self):
        self.assertEqual(parse_value(float, "2.5e3x"), 2500.0)
        self.assertEqual(parse_value(float, "1e"), 1.0)

    def testHexFloat(self):
        self.assertEqual(parse_value(float, "0x1p3"), 8.0)
        self.assertEqual(parse_value(float, "-0X1.8P1"), -3.0)

    def testInfinityAndNan(self):
        self.assertEqual(parse_value(float, "inf"), math.inf)
        self.assertEqual(parse_value(float, "-Infinity"), -math.inf)
        self.assertTrue(math.isnan(parse_value(float, "nan")))

    def testNothingScannedRejected(self):
        for token in ("abc", "", "e5", "."):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    parse_value(float, token)


class TestTypeShapes(TestCase):
    """Arity, container and composite classification."""

    def testArity(self):
        self.assertEqual(arity(bool), 0)
        self.assertEqual(arity(int), 1)
        self.assertEqual(arity(str), 1)
        self.assertEqual(arity(list[int]), 1)
        self.assertEqual(arity(list[bool]), 1)
        self.assertEqual(arity(tuple[int, float, str]), 3)
        self.assertEqual(arity(list[tuple[int, int]]), 2)

    def testContainers(self):
        self.assertTrue(is_container(list[int]))
        self.assertTrue(is_container(deque[str]))
        self.assertTrue(is_container(list))
        self.assertFalse(is_container(str))
        self.assertFalse(is_container(tuple[int, int]))

    def testBareContainerHoldsStrings(self):
        self.assertIs(element(list), str)
        self.assertIs(element(list[float]), float)

    def testSupports(self):
        self.assertTrue(supports(int))
        self.assertTrue(supports(list[str]))
        self.assertTrue(supports(tuple[int, str]))
        self.assertFalse(supports(dict))
        self.assertFalse(supports(complex))
        self.assertFalse(supports(list[list[int]]))
        self.assertFalse(supports(tuple[int, ...]))
        self.assertFalse(supports(tuple[list[int], int]))

    def testInitialValues(self):
        self.assertEqual(initial(list[int]), [])
        self.assertIsInstance(initial(deque[int]), deque)
        self.assertIs(initial(bool), False)
        self.assertIsNone(initial(int))

    def testUnsupportedTypeRaisesTypeError(self):
        with self.assertRaises(TypeError):
            parse_value(complex, "1")


class TestComposite(TestCase):
    """tuple[...] values consume one token per element."""

    def testElementWise(self):
        self.assertEqual(parse_value(tuple[int, float, str], "0x10", "2.5", "x"), (16, 2.5, "x"))

    def testWrongTokenCountRejected(self):
        with self.assertRaises(ValueError):
            parse_value(tuple[int, int], "1")

    def testOneBadElementRejectsAll(self):
        with self.assertRaises(ValueError):
            parse_value(tuple[int, int], "1", "two")


class TestFromString(TestCase):
    """Storing conversions into bound variables."""

    def testScalarReplaced(self):
        count = Variable(int)
        self.assertTrue(fromstring(count, "4"))
        self.assertTrue(fromstring(count, "5"))
        self.assertEqual(count.value, 5)

    def testContainerAppends(self):
        ws = Variable(list[int])
        for token in ("4", "5", "0x6"):
            self.assertTrue(fromstring(ws, token))
        self.assertEqual(ws.value, [4, 5, 6])

    def testFailureLeavesVariableUntouched(self):
        count = Variable(int, 13)
        self.assertFalse(fromstring(count, "abc"))
        self.assertEqual(count.value, 13)

        ws = Variable(list[int])
        self.assertFalse(fromstring(ws, "abc"))
        self.assertEqual(ws.value, [])

    def testCustomConverter(self):
        class Celsius(float):
            pass

        @converter(Celsius)
        def _(token):
            if not token.endswith("C"):
                raise ValueError(token)
            return Celsius(token[:-1])

        temperature = Variable(Celsius)
        self.assertTrue(fromstring(temperature, "21.5C"))
        self.assertEqual(temperature.value, 21.5)
        self.assertFalse(fromstring(temperature, "21.5F"))

    def testConverterRequiresType(self):
        with self.assertRaises(TypeError):
            converter("int")


class TestToString(TestCase):
    """Rendering typed defaults back to their textual form."""

    def testScalars(self):
        self.assertEqual(tostring(True), "true")
        self.assertEqual(tostring(False), "false")
        self.assertEqual(tostring(13), "13")
        self.assertEqual(tostring(0.1), "0.1")
        self.assertEqual(tostring("out.dat"), "out.dat")

    def testTupleIsSpaceSeparated(self):
        self.assertEqual(tostring((3, 4.5, "x")), "3 4.5 x")

    def testRenderedValuesConvertBack(self):
        for value in (True, False, -17, 1 / 3, 1e300, "out.dat"):
            with self.subTest(value=value):
                self.assertEqual(parse_value(type(value), tostring(value)), value)

    def testUnsupportedValueRejected(self):
        with self.assertRaises(TypeError):
            tostring(object())


if __name__ == "__main__":
    unittest.main()
