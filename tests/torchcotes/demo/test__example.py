import pytest
import torch

from torchcotes.demo import (
    INTEGRANDS,
    METHODS,
    cube,
    example,
    format_example,
    identity,
    square,
)
from torchcotes.quadrature import (
    NewtonCotes,
    QuadratureWarning,
    evaluate_trapezoid,
)


class TestIntegrands:
    def test_values(self):
        x = torch.tensor([-2.0, 0.5, 3.0])

        assert torch.equal(identity(x), x)
        assert torch.equal(square(x), torch.tensor([4.0, 0.25, 9.0]))
        assert torch.equal(cube(x), torch.tensor([-8.0, 0.125, 27.0]))

    def test_registry(self):
        assert INTEGRANDS == {"x": identity, "x^2": square, "x^3": cube}


class TestMethods:
    def test_order_and_rules(self):
        assert [name for name, _ in METHODS] == [
            "trapezoid",
            "simpson 1/3",
            "simpson 3/8",
            "mid-point",
            "boole",
        ]
        assert sorted(rule for _, rule in METHODS) == sorted(NewtonCotes.rules)


class TestExample:
    def test_two_iteration_counts(self):
        results = example(evaluate_trapezoid, "trapezoid", square, 1, 3)

        assert [(name, n) for name, n, _ in results] == [
            ("trapezoid", 100),
            ("trapezoid", 200),
        ]
        assert results[0][2] == pytest.approx(8.6668, abs=1e-4)
        assert results[1][2] == pytest.approx(8.6667, abs=1e-4)
        assert all(isinstance(value, float) for _, _, value in results)

    def test_iterations_parameter(self):
        results = example(
            evaluate_trapezoid, "trapezoid", identity, 0, 1, iterations=7
        )

        assert [n for _, n, _ in results] == [7, 14]

    def test_invalid_iterations(self):
        with pytest.raises(ValueError, match="iterations must be at least 1"):
            example(evaluate_trapezoid, "trapezoid", square, 1, 3, iterations=0)

    def test_non_finite_result_warns(self):
        with pytest.warns(QuadratureWarning, match="non-finite"):
            results = example(
                evaluate_trapezoid,
                "trapezoid",
                lambda x: 1 / x,
                0.0,
                1.0,
                iterations=4,
            )

        assert results[0][2] == float("inf")


class TestFormatExample:
    def test_layout(self):
        results = [("boole", 100, 8.666666666), ("boole", 200, 8.6666666666)]

        assert format_example(results, 1, 3) == (
            "Integral of the given function between 1.000 and 3.000"
            "(boole method)\n"
            "---------------\n"
            "With 100 iterations: 8.666667\n"
            "With 200 iterations: 8.666667\n"
            "---------------"
        )
