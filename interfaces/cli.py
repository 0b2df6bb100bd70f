"""
Command-line interface for the special functions library.

This CLI provides access to:
- Evaluation of any special function
- Inverse incomplete gamma and beta solvers with convergence details
- Numerical self-consistency diagnostics
"""

import logging

import click

from src.core.beta import beta, regularized_incomplete_beta
from src.core.error_function import erf, erfc, ierf
from src.core.gamma import digamma, gamma, gammaln, igamma
from src.core.incomplete_gamma import lower_gamma, regularized_lower_gamma, upper_gamma
from src.core.lambert import lambert
from src.diagnostics.identities import (
    check_against_reference,
    check_functional_equation,
    check_gamma_minimum,
    check_incomplete_gamma_sum,
    check_reflection,
)
from src.solvers.inverse import (
    ilower_gamma,
    iregularized_incomplete_beta,
    solve_incomplete_beta,
    solve_lower_gamma,
)

# name -> (function, number of float arguments, accepts a branch flag)
FUNCTIONS = {
    "erf": (erf, 1, False),
    "erfc": (erfc, 1, False),
    "ierf": (ierf, 1, False),
    "gamma": (gamma, 1, False),
    "gammaln": (gammaln, 1, False),
    "digamma": (digamma, 1, False),
    "igamma": (igamma, 1, True),
    "lambert": (lambert, 1, True),
    "lower-gamma": (lower_gamma, 2, False),
    "upper-gamma": (upper_gamma, 2, False),
    "regularized-lower-gamma": (regularized_lower_gamma, 2, False),
    "ilower-gamma": (ilower_gamma, 2, False),
    "beta": (beta, 2, False),
    "incomplete-beta": (regularized_incomplete_beta, 3, False),
    "iincomplete-beta": (iregularized_incomplete_beta, 3, False),
}

# (name, args) pairs compared against scipy by the check command
REFERENCE_CASES = [
    ("erf", (0.5,)),
    ("gamma", (4.5,)),
    ("gamma", (-1.5,)),
    ("gammaln", (30.0,)),
    ("digamma", (2.5,)),
    ("lower_gamma", (3.0, 2.0)),
    ("upper_gamma", (2.5, 6.0)),
    ("beta", (2.5, 3.5)),
    ("regularized_incomplete_beta", (2.0, 3.0, 0.4)),
    ("lambert", (5.0,)),
]


def _echo_result(result) -> None:
    status = "converged" if result.success else "NOT converged"
    click.echo(f"\nValue:      {result.value:.12g}")
    click.echo(f"Method:     {result.method}")
    click.echo(f"Iterations: {result.iterations}")
    click.echo(f"Status:     {status} ({result.message})")


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", count=True, help="Log solver decisions (-vv for every iteration)")
def cli(verbose):
    """Special Functions Toolkit - gamma, beta, error and Lambert W functions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@cli.command(name="eval", context_settings={"ignore_unknown_options": True})
@click.argument("function", type=click.Choice(sorted(FUNCTIONS)))
@click.argument("args", nargs=-1, type=float, required=True)
@click.option("--secondary", is_flag=True, help="Use the secondary branch (lambert, igamma)")
def evaluate(function, args, secondary):
    """Evaluate FUNCTION at ARGS."""
    fn, arity, branched = FUNCTIONS[function]
    if len(args) != arity:
        raise click.BadParameter(f"{function} takes {arity} argument(s), got {len(args)}", param_hint="ARGS")
    if secondary and not branched:
        raise click.BadParameter(f"{function} has no secondary branch", param_hint="--secondary")

    value = fn(*args, principal=not secondary) if branched else fn(*args)
    args_text = ", ".join(f"{arg:g}" for arg in args)
    click.echo(f"{function}({args_text}) = {value:.12g}")


@cli.command(name="invert-gamma", context_settings={"ignore_unknown_options": True})
@click.argument("s", type=float)
@click.argument("y", type=float)
@click.option("--method", "-m", type=click.Choice(["auto", "secant", "brent"]), default="auto")
def invert_gamma(s, y, method):
    """Solve lower_gamma(S, x) = Y for x."""
    _echo_result(solve_lower_gamma(s, y, method))


@cli.command(name="invert-beta", context_settings={"ignore_unknown_options": True})
@click.argument("a", type=float)
@click.argument("b", type=float)
@click.argument("p", type=float)
@click.option("--method", "-m", type=click.Choice(["auto", "newton", "brent"]), default="auto")
def invert_beta(a, b, p, method):
    """Solve incomplete_beta(A, B, x) = P for x."""
    _echo_result(solve_incomplete_beta(a, b, p, method))


@cli.command()
def check():
    """Run numerical self-consistency and reference diagnostics."""
    checks = [
        ("gamma minimum", check_gamma_minimum()),
        ("reflection x=0.3", check_reflection(0.3)),
        ("functional equation x=2.5", check_functional_equation(2.5)),
        ("incomplete gamma sum s=3, x=2", check_incomplete_gamma_sum(3.0, 2.0)),
    ]
    checks += [
        (f"scipy {name}{args}", check_against_reference(name, *args)) for name, args in REFERENCE_CASES
    ]

    failures = 0
    for label, result in checks:
        if result.is_valid:
            click.echo(f"  PASS  {label}")
        else:
            failures += 1
            click.echo(f"  FAIL  {label}: {'; '.join(result.violations)}")

    click.echo(f"\n{len(checks) - failures}/{len(checks)} checks passed")
    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
