"""
tanhpath training driver.

Trains every configured architecture on the same path, one sample at a
time, and reports how close each gets. Too small a network cannot
reproduce the path; a squeeze in the middle often still can.

Usage:
    python -m tanhpath --passes 2000
    python -m tanhpath --path ramp --load --save --formulas --plot curves.png
"""

import argparse
import time
from pathlib import Path

from . import config as cfg
from .exceptions import UnsupportedShape
from .formula import closed_form_function, export_formulas
from .metrics import format_table, mse, saturation
from .plotting import plot_registry, sample_grid
from .problems import PATHS, get_path_problem
from .registry import NetworkRegistry, build_registry
from .store import ParameterStore


def progress_rows(registry, X, y):
    rows = []
    for network in registry:
        rows.append([
            network.id,
            network.describe(),
            f"{mse(network, X, y):.6f}",
            f"{saturation(network, X) * 100:.1f}%",
        ])
    return rows


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Train tanh networks of several shapes on one path")
    parser.add_argument('--path', choices=sorted(PATHS), default='step', help='Target path')
    parser.add_argument('--passes', type=int, default=cfg.PASSES, help='Training passes over the path')
    parser.add_argument('--points-per-segment', type=int, default=cfg.POINTS_PER_SEGMENT)
    parser.add_argument('--lr', type=float, default=cfg.LEARNING_RATE, help='Learning rate')
    parser.add_argument('--seed', type=int, default=cfg.SEED)
    parser.add_argument('--store', default=cfg.STORE_DIR, help='Directory for parameter files')
    parser.add_argument('--load', action='store_true', help='Load saved parameters before training')
    parser.add_argument('--save', action='store_true', help='Save parameters after training')
    parser.add_argument('--formulas', default=None, metavar='DIR',
                        nargs='?', const=cfg.FORMULA_DIR, help='Export closed forms to DIR')
    parser.add_argument('--plot', default=None, metavar='FILE', help='Save curves to an image')
    parser.add_argument('--closed-form-id', type=int, default=2,
                        help='Network whose closed form gets its own plot panel')
    parser.add_argument('--log-every', type=int, default=cfg.LOG_EVERY)
    parser.add_argument('--quiet', action='store_true')
    return parser.parse_args(argv)


def train(args) -> NetworkRegistry:
    """Main training loop."""
    verbose = not args.quiet

    X, y = get_path_problem(args.path, points_per_segment=args.points_per_segment)
    registry = build_registry(seed=args.seed, learning_rate=args.lr)
    store = ParameterStore(args.store)

    if verbose:
        print("=" * 70)
        print("TANH NETWORKS ON A PATH")
        print("=" * 70)
        print(f"Path: {args.path} ({len(X)} samples)")
        print(f"Networks: {', '.join(n.describe() for n in registry)}")
        print(f"Learning rate: {args.lr}")

    if args.load:
        if verbose:
            print(f"\nLoading from {store.directory}/")
        registry.load_all(store, verbose=verbose)

    start_time = time.time()
    passes_done = 0
    xs = sample_grid()
    snapshot = None

    try:
        for step in range(1, args.passes + 1):
            # Curves at the start of each logging interval, drawn in silver
            if args.plot and (step - 1) % args.log_every == 0:
                snapshot = registry.predict_curves(xs)

            registry.train_pass(X, y)
            passes_done = step

            if verbose and (step % args.log_every == 0 or step == args.passes):
                elapsed = time.time() - start_time
                print(f"\nPass {step} ({elapsed:.1f}s)")
                print(format_table(progress_rows(registry, X, y)))

    except KeyboardInterrupt:
        print("\n\nTraining interrupted!")

    finally:
        if verbose:
            print("\n" + "=" * 70)
            print(f"FINAL RESULTS after {passes_done} passes")
            print("=" * 70)
            print(format_table(progress_rows(registry, X, y)))

        if args.save:
            registry.save_all(store)
            if verbose:
                print(f"\nSaved {len(registry)} networks to {store.directory}/")

        if args.formulas:
            if verbose:
                print(f"\nFormulas -> {args.formulas}/")
            export_formulas(registry, args.formulas, verbose=verbose)

        if args.plot:
            function = None
            if args.closed_form_id in registry:
                try:
                    function = closed_form_function(registry[args.closed_form_id])
                except UnsupportedShape as exc:
                    if verbose:
                        print(f"\nNo closed-form panel: {exc}")
            Path(args.plot).parent.mkdir(parents=True, exist_ok=True)
            plot_registry(registry, X, y, path=args.plot, closed_form=function,
                          previous=snapshot, xs=xs)
            if verbose:
                print(f"\nCurves: {args.plot}")

    return registry


def main(argv=None):
    train(parse_args(argv))


if __name__ == "__main__":
    main()
