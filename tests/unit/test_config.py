"""Unit tests for configuration objects and the readout factory."""
import numpy as np
import pytest

import relm  # noqa: F401
from relm.core.errors import InvalidArgumentError, InvalidStateError
from relm.core.identifiers import ReadoutKind
from relm.models.config import (
    ElasticNetReadoutConfig,
    HiddenLayerConfig,
    RELMConfig,
    RidgeReadoutConfig,
    readout_config_from_alpha,
)
from relm.readout.elastic_net import ElasticNetReadout
from relm.readout.factory import ReadoutFactory, predict_readout, train_readout
from relm.readout.ridge import RidgeReadout


class TestReadoutVariant:
    def test_alpha_zero_is_ridge(self):
        cfg = readout_config_from_alpha(100.0, 0.0)
        assert isinstance(cfg, RidgeReadoutConfig)
        assert cfg.kind is ReadoutKind.RIDGE

    @pytest.mark.parametrize("alpha", [1e-3, 0.5, 1.0])
    def test_positive_alpha_is_elastic_net(self, alpha):
        cfg = readout_config_from_alpha(100.0, alpha)
        assert isinstance(cfg, ElasticNetReadoutConfig)
        assert cfg.alpha == alpha
        assert cfg.penalty == pytest.approx(0.01)

    @pytest.mark.parametrize("C, alpha", [(0.0, 0.0), (-1.0, 0.5), (1.0, -0.1), (1.0, 1.01)])
    def test_invalid_values(self, C, alpha):
        with pytest.raises(InvalidArgumentError):
            readout_config_from_alpha(C, alpha)

    def test_elastic_net_config_rejects_alpha_zero(self):
        with pytest.raises(InvalidArgumentError, match="alpha must be > 0"):
            ElasticNetReadoutConfig(regularization=1.0, alpha=0.0).validate()

    def test_to_dict(self):
        assert RidgeReadoutConfig(regularization=5.0).to_dict() == {
            "kind": "ridge",
            "regularization": 5.0,
            "alpha": 0.0,
        }
        d = ElasticNetReadoutConfig(regularization=5.0, alpha=0.3).to_dict()
        assert d["kind"] == "elastic_net"
        assert d["alpha"] == 0.3
        assert d["standardize"] is True


class TestFactory:
    def test_creates_ridge(self):
        readout = ReadoutFactory.create_readout(RidgeReadoutConfig(regularization=3.0))
        assert isinstance(readout, RidgeReadout)
        assert readout.regularization == 3.0

    def test_creates_elastic_net(self):
        cfg = ElasticNetReadoutConfig(regularization=3.0, alpha=0.5, standardize=False, max_iter=50)
        readout = ReadoutFactory.create_readout(cfg)
        assert isinstance(readout, ElasticNetReadout)
        assert readout.standardize is False
        assert readout.max_iter == 50

    def test_rejects_missing_and_unknown(self):
        with pytest.raises(InvalidArgumentError):
            ReadoutFactory.create_readout(None)
        with pytest.raises(TypeError, match="unknown config type"):
            ReadoutFactory.create_readout({"alpha": 0})


class TestRELMConfig:
    def test_create_defaults(self):
        cfg = RELMConfig.create(n_inputs=4)
        assert cfg.hidden.n_hidden == 1000
        assert cfg.hidden.activation == "sig"
        assert isinstance(cfg.readout, RidgeReadoutConfig)
        assert cfg.readout.regularization == 1000.0

    def test_invalid_hidden(self):
        with pytest.raises(InvalidArgumentError, match="RELMConfig.hidden"):
            RELMConfig(hidden=HiddenLayerConfig(n_inputs=0), readout=RidgeReadoutConfig())

    def test_to_dict(self):
        cfg = RELMConfig.create(n_inputs=2, n_hidden=10, alpha=1.0, seed=7)
        d = cfg.to_dict()
        assert d["hidden"] == {"n_inputs": 2, "n_hidden": 10, "activation": "sig", "seed": 7}
        assert d["readout"]["kind"] == "elastic_net"


class TestFunctionalReadout:
    H = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    Y = np.array([[1.0], [2.0], [3.0]])

    def test_ridge_round(self):
        state = train_readout(self.H, self.Y, 1000.0, 0.0)
        assert state.intercept is None
        np.testing.assert_allclose(np.asarray(predict_readout(self.H, state)), self.Y, atol=1e-2)

    def test_lasso_round(self):
        state = train_readout(self.H, self.Y, 1.0, 1.0)
        assert state.intercept is not None
        np.testing.assert_allclose(np.asarray(predict_readout(self.H, state)), np.full((3, 1), 2.0))

    def test_predict_without_state(self):
        with pytest.raises(InvalidStateError):
            predict_readout(self.H, None)

    def test_invalid_alpha_before_any_work(self):
        with pytest.raises(InvalidArgumentError, match="alpha"):
            train_readout(self.H, self.Y, 1.0, 1.5)
