import math
import unittest

import numpy as np

from neurite import NonPositiveError, OutOfRangeError
from neurite.schedules import (
    ExponentialFunction,
    HyperbolicFunction,
    LearningRateFunction,
    LinearFunction,
    get_function,
    register_function,
    unregister_function,
)


class TestLinearFunction(unittest.TestCase):
    def test_example(self):
        f = LinearFunction(1.0, 0.0)
        self.assertEqual(f.get_rate(0, 10), 1.0)
        self.assertAlmostEqual(f.get_rate(5, 10), 0.5)
        self.assertAlmostEqual(f.get_rate(9, 10), 0.1)

    def test_last_iteration_stops_short_of_final(self):
        f = LinearFunction(0.2, 0.8)
        last = f.get_rate(3, 4)
        self.assertAlmostEqual(last, 0.2 + 0.6 * 3 / 4)
        self.assertLess(last, 0.8)

    def test_affine_slope(self):
        f = LinearFunction(0.3, 1.7)
        n = 7
        slope = (1.7 - 0.3) / n
        for i in range(1, n):
            with self.subTest(i=i):
                self.assertAlmostEqual(f.get_rate(i, n) - f.get_rate(i - 1, n), slope)

    def test_constant_when_rates_equal(self):
        f = LinearFunction(0.05, 0.05)
        for i in range(20):
            self.assertEqual(f.get_rate(i, 20), 0.05)

    def test_monotonic(self):
        up = [LinearFunction(0.1, 0.9)(i, 10) for i in range(10)]
        down = [LinearFunction(0.9, 0.1)(i, 10) for i in range(10)]
        self.assertTrue(all(a < b for a, b in zip(up, up[1:])))
        self.assertTrue(all(a > b for a, b in zip(down, down[1:])))

    def test_no_sign_constraint(self):
        f = LinearFunction(-1.0, 1.0)
        self.assertEqual(f.get_rate(0, 2), -1.0)
        self.assertEqual(f.get_rate(1, 2), 0.0)

    def test_invalid_iteration(self):
        f = LinearFunction(1.0, 0.0)
        for i in (10, -1):
            with self.subTest(i=i):
                with self.assertRaises(OutOfRangeError) as cm:
                    f.get_rate(i, 10)
                self.assertEqual(cm.exception.name, "current_iteration")

    def test_invalid_epochs(self):
        f = LinearFunction(1.0, 0.0)
        for n in (0, -5):
            with self.subTest(n=n):
                with self.assertRaises(NonPositiveError) as cm:
                    f.get_rate(0, n)
                self.assertEqual(cm.exception.name, "training_epochs")

    def test_non_integer_arguments(self):
        f = LinearFunction(1.0, 0.0)
        for args in ((0.5, 2), (0, 2.5), (0.5, 2.5), (1.0, 3)):
            with self.subTest(args=args):
                with self.assertRaises(TypeError):
                    f.get_rate(*args)

    def test_numpy_integers_accepted(self):
        f = LinearFunction(1.0, 0.0)
        self.assertAlmostEqual(f.get_rate(np.int64(5), np.int32(10)), 0.5)

    def test_rates_read_only(self):
        f = LinearFunction(1.0, 0.0)
        self.assertEqual((f.initial_rate, f.final_rate), (1.0, 0.0))
        with self.assertRaises(AttributeError):
            f.initial_rate = 2.0


class TestOtherFunctions(unittest.TestCase):
    def test_exponential(self):
        f = ExponentialFunction(1.0, 0.01)
        self.assertEqual(f.get_rate(0, 4), 1.0)
        self.assertAlmostEqual(f.get_rate(2, 4), 0.1)
        self.assertAlmostEqual(f.get_rate(3, 4), 0.01 ** 0.75)

    def test_hyperbolic(self):
        f = HyperbolicFunction(1.0, 0.1)
        self.assertAlmostEqual(f.get_rate(0, 10), 1.0)
        for i in range(10):
            with self.subTest(i=i):
                expected = 1 / (1.0 + (10.0 - 1.0) * i / 10)
                self.assertAlmostEqual(f.get_rate(i, 10), expected)

    def test_positive_rates_required(self):
        for cls in (ExponentialFunction, HyperbolicFunction):
            for rates in ((0.0, 0.1), (0.1, -0.1)):
                with self.subTest(cls=cls.__name__, rates=rates):
                    with self.assertRaises(NonPositiveError):
                        cls(*rates)

    def test_shared_validation(self):
        for f in (ExponentialFunction(0.5, 0.1), HyperbolicFunction(0.5, 0.1)):
            with self.subTest(f=f):
                with self.assertRaises(OutOfRangeError):
                    f.get_rate(3, 3)
                with self.assertRaises(NonPositiveError):
                    f.get_rate(0, 0)


class TestRegistry(unittest.TestCase):
    def test_lookup(self):
        f = get_function("exponential", 0.5, 0.05)
        self.assertIsInstance(f, ExponentialFunction)
        self.assertEqual(f.initial_rate, 0.5)
        self.assertIsInstance(get_function("linear", 1, 0), LinearFunction)
        self.assertIsInstance(get_function("hyperbolic", 1, 0.5), HyperbolicFunction)

    def test_unknown(self):
        with self.assertRaises(KeyError) as cm:
            get_function("cosine", 1.0, 0.0)
        self.assertIn("linear", str(cm.exception))

    def test_register_new_variant(self):
        class CosineFunction(LearningRateFunction):
            def _rate(self, i, n):
                t = 0.5 * (1 + math.cos(math.pi * i / n))
                return self.final_rate + (self.initial_rate - self.final_rate) * t

        register_function("cosine", CosineFunction)
        self.addCleanup(unregister_function, "cosine")
        f = get_function("cosine", 1.0, 0.0)
        self.assertAlmostEqual(f.get_rate(0, 4), 1.0)
        self.assertAlmostEqual(f.get_rate(2, 4), 0.5)
        with self.assertRaises(OutOfRangeError):
            f.get_rate(4, 4)

    def test_duplicate_name_rejected(self):
        with self.assertRaises(ValueError):
            register_function("linear", ExponentialFunction)
        self.assertIsInstance(get_function("linear", 1, 0), LinearFunction)

    def test_overwrite(self):
        register_function("linear", ExponentialFunction, overwrite=True)
        self.addCleanup(register_function, "linear", LinearFunction, overwrite=True)
        self.assertIsInstance(get_function("linear", 1, 0.5), ExponentialFunction)

    def test_base_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            LearningRateFunction(1.0, 0.0).get_rate(0, 1)
