"""Unit tests for the ridge readout (primal/dual closed forms)."""
import numpy as np
import jax.numpy as jnp
import pytest

import relm  # noqa: F401  (enables float64)
from relm.core.errors import InvalidArgumentError, InvalidStateError, NumericalError
from relm.core.identifiers import Formulation
from relm.readout.ridge import MAX_CONDITION, RidgeReadout, _check_gram, select_formulation, solve_ridge


def _problem(n_samples, n_hidden, n_outputs=2, seed=0):
    rng = np.random.default_rng(seed)
    H = rng.standard_normal((n_samples, n_hidden))
    Y = rng.standard_normal((n_samples, n_outputs))
    return H, Y


def _normal_equation_residual(H, Y, W, C):
    lhs = (H.T @ H + np.eye(H.shape[1]) / C) @ np.asarray(W)
    return lhs, H.T @ Y


# -------------------------------------------------------------------
# 1. Normal equations in both regimes
# -------------------------------------------------------------------
class TestNormalEquations:
    @pytest.mark.parametrize("C", [0.1, 10.0, 1000.0])
    def test_primal_regime(self, C):
        H, Y = _problem(60, 12)
        assert select_formulation(*H.shape) is Formulation.PRIMAL
        W = solve_ridge(H, Y, C)
        lhs, rhs = _normal_equation_residual(H, Y, W, C)
        np.testing.assert_allclose(lhs, rhs, rtol=1e-7, atol=1e-7)

    @pytest.mark.parametrize("C", [0.1, 10.0, 1000.0])
    def test_dual_regime(self, C):
        H, Y = _problem(10, 40)
        assert select_formulation(*H.shape) is Formulation.DUAL
        W = solve_ridge(H, Y, C)
        lhs, rhs = _normal_equation_residual(H, Y, W, C)
        np.testing.assert_allclose(lhs, rhs, rtol=1e-7, atol=1e-7)

    def test_square_problem_uses_primal(self):
        assert select_formulation(5, 5) is Formulation.PRIMAL


# -------------------------------------------------------------------
# 2. Primal and dual give the same weights
# -------------------------------------------------------------------
class TestBranchEquivalence:
    @pytest.mark.parametrize("shape", [(40, 15), (15, 40)])
    def test_forced_formulations_agree(self, shape):
        H, Y = _problem(*shape, seed=3)
        W_primal = solve_ridge(H, Y, 5.0, formulation=Formulation.PRIMAL)
        W_dual = solve_ridge(H, Y, 5.0, formulation="dual")
        np.testing.assert_allclose(np.asarray(W_primal), np.asarray(W_dual), rtol=1e-7, atol=1e-9)

    def test_transposed_problem_shapes(self):
        """Tall and wide problems both return (L, m) weights."""
        H, Y = _problem(30, 8)
        assert solve_ridge(H, Y, 1.0).shape == (8, 2)
        H_wide, Y_wide = _problem(8, 30)
        assert solve_ridge(H_wide, Y_wide, 1.0).shape == (30, 2)

    def test_unknown_formulation_rejected(self):
        H, Y = _problem(10, 4)
        with pytest.raises(InvalidArgumentError, match="formulation"):
            solve_ridge(H, Y, 1.0, formulation="qr")


# -------------------------------------------------------------------
# 3. Behaviour
# -------------------------------------------------------------------
class TestRidgeBehaviour:
    def test_exactly_solvable_scenario(self):
        H = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        Y = np.array([[1.0], [2.0], [3.0]])
        readout = RidgeReadout(regularization=1000.0).fit(H, Y)
        np.testing.assert_allclose(np.asarray(readout.state.output_weight), [[1.0], [2.0]], atol=1e-2)
        np.testing.assert_allclose(np.asarray(readout.predict(H)), Y, atol=1e-2)
        assert readout.state.intercept is None
        assert readout.formulation_ is Formulation.PRIMAL

    def test_residual_decreases_with_c(self):
        rng = np.random.default_rng(7)
        H = rng.standard_normal((50, 10))
        Y = H @ rng.standard_normal((10, 1))
        residuals = []
        for C in [1e-3, 1e-2, 1e-1, 1.0, 10.0, 100.0, 1000.0]:
            W = np.asarray(solve_ridge(H, Y, C))
            residuals.append(np.linalg.norm(H @ W - Y))
        assert np.all(np.diff(residuals) <= 1e-10), residuals
        assert residuals[-1] < 1e-2 * residuals[0]

    def test_one_dimensional_targets(self):
        H, Y = _problem(20, 5, n_outputs=1)
        W = solve_ridge(H, Y[:, 0], 1.0)
        assert W.shape == (5, 1)

    def test_inputs_not_mutated(self):
        H, Y = _problem(20, 5)
        H_copy, Y_copy = H.copy(), Y.copy()
        solve_ridge(H, Y, 1.0)
        np.testing.assert_array_equal(H, H_copy)
        np.testing.assert_array_equal(Y, Y_copy)

    def test_accepts_jax_arrays(self):
        H, Y = _problem(20, 5)
        W_np = solve_ridge(H, Y, 2.0)
        W_jax = solve_ridge(jnp.asarray(H), jnp.asarray(Y), 2.0)
        np.testing.assert_allclose(np.asarray(W_np), np.asarray(W_jax))

    def test_to_dict(self):
        readout = RidgeReadout(regularization=10.0)
        assert readout.to_dict() == {"kind": "ridge", "regularization": 10.0, "alpha": 0.0}
        H, Y = _problem(4, 9)
        readout.fit(H, Y)
        assert readout.to_dict()["formulation"] == "dual"


# -------------------------------------------------------------------
# 4. Errors
# -------------------------------------------------------------------
class TestRidgeErrors:
    @pytest.mark.parametrize("C", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_regularization(self, C):
        H, Y = _problem(10, 3)
        with pytest.raises(InvalidArgumentError, match="regularization"):
            solve_ridge(H, Y, C)

    def test_row_mismatch(self):
        H, _ = _problem(10, 3)
        with pytest.raises(InvalidArgumentError, match="Mismatched samples"):
            solve_ridge(H, np.zeros((9, 1)), 1.0)

    def test_non_finite_features(self):
        H, Y = _problem(10, 3)
        H[2, 1] = np.nan
        with pytest.raises(InvalidArgumentError, match="NaN or Inf"):
            solve_ridge(H, Y, 1.0)

    def test_non_finite_targets(self):
        H, Y = _problem(10, 3)
        Y[0, 0] = np.inf
        with pytest.raises(InvalidArgumentError, match="NaN or Inf"):
            solve_ridge(H, Y, 1.0)

    def test_overflowing_gram_is_numerical_error(self):
        H = np.array([[1e200, 1.0], [1.0, 1.0], [0.0, 1.0]])
        Y = np.ones((3, 1))
        with pytest.raises(NumericalError, match="NaN/Inf"):
            solve_ridge(H, Y, 1.0)

    def test_singular_gram_is_numerical_error(self):
        H = np.array([[1.0, 0.0], [1.0, 0.0], [1.0, 0.0]])
        Y = np.ones((3, 1))
        with pytest.raises(NumericalError, match="singular"):
            solve_ridge(H, Y, 1e300)

    def test_condition_threshold_on_rotated_gram(self):
        theta = 0.3
        Q = jnp.array([[jnp.cos(theta), -jnp.sin(theta)], [jnp.sin(theta), jnp.cos(theta)]])
        well_posed = Q @ jnp.diag(jnp.array([1.0, 1e-8])) @ Q.T
        _check_gram(well_posed, Formulation.PRIMAL)

        singular = jnp.diag(jnp.array([1.0, 0.1 / MAX_CONDITION]))
        with pytest.raises(NumericalError, match="condition number"):
            _check_gram(singular, Formulation.DUAL)

    def test_non_positive_eigenvalue_is_singular(self):
        with pytest.raises(NumericalError, match="singular"):
            _check_gram(jnp.diag(jnp.array([1.0, 0.0])), Formulation.PRIMAL)

    def test_predict_before_fit(self):
        with pytest.raises(InvalidStateError):
            RidgeReadout(regularization=1.0).predict(np.ones((2, 2)))

    def test_predict_wrong_width(self):
        H, Y = _problem(10, 3)
        readout = RidgeReadout(regularization=1.0).fit(H, Y)
        with pytest.raises(InvalidArgumentError, match="3 columns"):
            readout.predict(np.ones((2, 4)))
