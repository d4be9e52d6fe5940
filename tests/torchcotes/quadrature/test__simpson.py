import numpy as np
import pytest
import scipy.integrate
import torch


class TestEvaluateSimpson13:
    def test_linear(self):
        """Integrate x from 1 to 3 = 4"""
        from torchcotes.quadrature import evaluate_simpson_1_3

        result = evaluate_simpson_1_3(lambda x: x, 100, 1, 3)

        assert abs(result.item() - 4.0) < 1e-5

    def test_square(self):
        from torchcotes.quadrature import evaluate_simpson_1_3

        result = evaluate_simpson_1_3(lambda x: x * x, 100, 1.0, 3.0)

        assert abs(result.item() - 26 / 3) < 1e-4

    @pytest.mark.parametrize("n", [2, 4, 10, 64])
    def test_cubic_exact_for_even_n(self, n):
        """Simpson's 1/3 rule is exact for cubics"""
        from torchcotes.quadrature import evaluate_simpson_1_3

        # integral of x^3 from 0 to 2 = 4
        result = evaluate_simpson_1_3(lambda x: x**3, n, 0.0, 2.0)

        assert result.item() == pytest.approx(4.0, rel=1e-12)

    def test_matches_scipy(self):
        """Compare with scipy.integrate.simpson for an odd number of points"""
        from torchcotes.quadrature import evaluate_simpson_1_3

        result = evaluate_simpson_1_3(torch.exp, 40, -1.0, 2.0)

        x = np.linspace(-1.0, 2.0, 41)
        expected = scipy.integrate.simpson(np.exp(x), x=x)

        assert torch.allclose(
            result, torch.tensor(expected, dtype=result.dtype), rtol=1e-12
        )

    def test_higher_order_accuracy(self):
        """Simpson should be more accurate than trapezoid for smooth functions"""
        from torchcotes.quadrature import (
            evaluate_simpson_1_3,
            evaluate_trapezoid,
        )

        # integral from 0 to 1 = 1/5
        trap_result = evaluate_trapezoid(lambda x: x**4, 10, 0.0, 1.0)
        simp_result = evaluate_simpson_1_3(lambda x: x**4, 10, 0.0, 1.0)

        trap_error = abs(trap_result.item() - 0.2)
        simp_error = abs(simp_result.item() - 0.2)

        assert simp_error < trap_error

    def test_odd_n_accepted(self):
        """Odd n gives a defined but distorted result"""
        from torchcotes.quadrature import evaluate_simpson_1_3

        result = evaluate_simpson_1_3(lambda x: x, 3, 0.0, 3.0)

        # (h/3) * (0 + 4*1 + 2*2 + 3) = 11/3
        assert torch.isfinite(result)
        assert result.item() == pytest.approx(11 / 3, rel=1e-12)
        assert result.item() != pytest.approx(4.5)


class TestEvaluateSimpson38:
    @pytest.mark.parametrize("n", [3, 6, 99])
    def test_cubic_exact_for_multiple_of_three(self, n):
        from torchcotes.quadrature import evaluate_simpson_3_8

        result = evaluate_simpson_3_8(lambda x: x**3, n, 0.0, 2.0)

        assert result.item() == pytest.approx(4.0, rel=1e-12)

    def test_square_multiple_of_three(self):
        from torchcotes.quadrature import evaluate_simpson_3_8

        result = evaluate_simpson_3_8(lambda x: x * x, 99, 1.0, 3.0)

        assert abs(result.item() - 26 / 3) < 1e-10

    def test_square_deviates_when_n_not_multiple_of_three(self):
        """With n = 100 the 3/8 rule misses the value the other rules hit"""
        from torchcotes.quadrature import (
            evaluate_boole,
            evaluate_midpoint,
            evaluate_simpson_1_3,
            evaluate_simpson_3_8,
            evaluate_trapezoid,
        )

        exact = 26 / 3

        def square(x):
            return x * x

        for rule in (
            evaluate_trapezoid,
            evaluate_simpson_1_3,
            evaluate_midpoint,
            evaluate_boole,
        ):
            assert abs(rule(square, 100, 1.0, 3.0).item() - exact) < 1e-3

        result = evaluate_simpson_3_8(square, 100, 1.0, 3.0)

        assert abs(result.item() - exact) > 1e-3

    def test_linear_deviates_when_n_not_multiple_of_three(self):
        from torchcotes.quadrature import evaluate_simpson_3_8

        result = evaluate_simpson_3_8(lambda x: x, 100, 1.0, 3.0)

        # The trailing panel is weighted 3h/8 per endpoint instead of h/2
        assert result.item() == pytest.approx(
            4.0 - 0.02 / 8 * (2.98 + 3.0), rel=1e-9
        )


class TestSimpsonWeights:
    def test_1_3_pattern(self):
        from torchcotes.quadrature import simpson_1_3_weights

        assert simpson_1_3_weights(4).tolist() == [1.0, 4.0, 2.0, 4.0, 1.0]

    def test_1_3_odd_n(self):
        from torchcotes.quadrature import simpson_1_3_weights

        assert simpson_1_3_weights(3).tolist() == [1.0, 4.0, 2.0, 1.0]

    def test_3_8_pattern(self):
        from torchcotes.quadrature import simpson_3_8_weights

        assert simpson_3_8_weights(6).tolist() == [
            1.0,
            3.0,
            3.0,
            2.0,
            3.0,
            3.0,
            1.0,
        ]

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_dtype(self, dtype):
        from torchcotes.quadrature import (
            simpson_1_3_weights,
            simpson_3_8_weights,
        )

        assert simpson_1_3_weights(4, dtype=dtype).dtype == dtype
        assert simpson_3_8_weights(6, dtype=dtype).dtype == dtype


class TestSimpsonGradients:
    def test_gradient_closure_param(self):
        from torchcotes.quadrature import evaluate_simpson_1_3

        theta = torch.tensor(2.0, requires_grad=True, dtype=torch.float64)

        result = evaluate_simpson_1_3(lambda x: theta * x**2, 10, 0, 1)
        result.backward()

        assert torch.allclose(
            theta.grad, torch.tensor(1 / 3, dtype=torch.float64)
        )

    def test_gradcheck_limits(self):
        from torchcotes.quadrature import evaluate_simpson_3_8

        a = torch.tensor(0.5, requires_grad=True, dtype=torch.float64)
        b = torch.tensor(2.0, requires_grad=True, dtype=torch.float64)

        def fn(a_, b_):
            return evaluate_simpson_3_8(torch.cos, 12, a_, b_)

        assert torch.autograd.gradcheck(fn, (a, b), raise_exception=True)


class TestSimpsonEdgeCases:
    def test_degenerate_interval(self):
        from torchcotes.quadrature import (
            evaluate_simpson_1_3,
            evaluate_simpson_3_8,
        )

        assert evaluate_simpson_1_3(torch.exp, 4, 1.0, 1.0).item() == 0.0
        assert evaluate_simpson_3_8(torch.exp, 3, 1.0, 1.0).item() == 0.0

    def test_zero_subintervals_raises(self):
        from torchcotes.quadrature import (
            evaluate_simpson_1_3,
            evaluate_simpson_3_8,
        )

        with pytest.raises(ValueError, match="at least 1"):
            evaluate_simpson_1_3(torch.exp, 0, 0.0, 1.0)
        with pytest.raises(ValueError, match="at least 1"):
            evaluate_simpson_3_8(torch.exp, -3, 0.0, 1.0)
