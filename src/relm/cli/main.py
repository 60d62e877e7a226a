"""src/relm/cli/main.py
Command-line driver: train an R-ELM on a synthetic dataset and report errors.

    relm --dataset sine --hidden 100                 # ridge
    relm --dataset linear --hidden 100 --alpha 1     # lasso
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from relm.utils.jax_config import ensure_x64_enabled

ensure_x64_enabled()

from relm.core.errors import RELMError
from relm.core.identifiers import Activation
from relm.data.generators import DATASETS, DataGenerationConfig, train_test_split
from relm.models.relm import RegularizedELM
from relm.utils.metrics import calculate_mse
from relm.utils.reporting import print_readout_summary
from relm.utils.timing import TimingRecorder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Regularized Extreme Learning Machine demo")
    parser.add_argument("--dataset", type=str, default="sine", choices=sorted(DATASETS))
    parser.add_argument("--samples", type=int, default=400)
    parser.add_argument("--features", type=int, default=1)
    parser.add_argument("--outputs", type=int, default=1)
    parser.add_argument("--noise", type=float, default=0.05)
    parser.add_argument("--hidden", type=int, default=100, help="Number of hidden neurons")
    parser.add_argument("--regularization", "-C", type=float, default=1000.0, help="Regularization parameter C")
    parser.add_argument("--alpha", type=float, default=0.0, help="0: ridge | 1: lasso | (0,1): elastic net")
    parser.add_argument(
        "--activation",
        type=str,
        default=Activation.SIGMOID.value,
        choices=[a.value for a in Activation],
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        data_cfg = DataGenerationConfig(
            n_samples=args.samples,
            n_features=args.features,
            n_outputs=args.outputs,
            noise_level=args.noise,
            seed=args.seed,
        )
        X, Y = DATASETS[args.dataset](data_cfg)
        X_tr, Y_tr, X_te, Y_te = train_test_split(X, Y, data_cfg.test_ratio, seed=args.seed)

        recorder = TimingRecorder()
        model = RegularizedELM(
            n_inputs=X.shape[1],
            n_hidden=args.hidden,
            regularization=args.regularization,
            alpha=args.alpha,
            activation=args.activation,
            seed=args.seed,
            timing_hook=recorder,
            verbose=args.verbose,
        )
        print(f"[RELM] Running {model!r} on '{args.dataset}' ({X_tr.shape[0]} train / {X_te.shape[0]} test)")

        model.train(X_tr, Y_tr)
        train_mse = calculate_mse(model.predict(X_tr), Y_tr)
        test_mse = calculate_mse(model.predict(X_te), Y_te)
    except RELMError as exc:
        print(f"[RELM] Error: {exc}", file=sys.stderr)
        return 1

    timings = {event: seconds for event, seconds in recorder.events}
    print_readout_summary(model.state, metrics={"train MSE": train_mse, "test MSE": test_mse}, timings=timings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
