# Package init
# Enforce 64-bit precision globally for numerical stability and determinism
import os
os.environ.setdefault("JAX_ENABLE_X64", "True")

from relm.utils.jax_config import ensure_x64_enabled

ensure_x64_enabled()

from relm.core.errors import RELMError, InvalidArgumentError, InvalidStateError, NumericalError  # noqa: E402
from relm.core.identifiers import Activation, Formulation, ReadoutKind  # noqa: E402
from relm.models import (  # noqa: E402
    ElasticNetReadoutConfig,
    HiddenLayerConfig,
    RELMConfig,
    RegularizedELM,
    RidgeReadoutConfig,
    readout_config_from_alpha,
)
from relm.layers import HiddenLayer  # noqa: E402
from relm.readout import (  # noqa: E402
    ElasticNetReadout,
    ReadoutState,
    RidgeReadout,
    solve_elastic_net,
    solve_ridge,
)
from relm.readout.factory import ReadoutFactory, predict_readout, train_readout  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "RELMError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NumericalError",
    "Activation",
    "Formulation",
    "ReadoutKind",
    "HiddenLayerConfig",
    "RidgeReadoutConfig",
    "ElasticNetReadoutConfig",
    "RELMConfig",
    "readout_config_from_alpha",
    "RegularizedELM",
    "HiddenLayer",
    "ReadoutState",
    "RidgeReadout",
    "ElasticNetReadout",
    "solve_ridge",
    "solve_elastic_net",
    "ReadoutFactory",
    "train_readout",
    "predict_readout",
]
