"""
Command-line interface for site_percolation.

Commands:
    percolation stats N T              - Threshold statistics for one grid size
    percolation sweep --config run.yaml - Threshold sweep over several grid sizes

Examples:
    percolation stats 200 100
    percolation stats 200 100 --seed 42 --confidence 0.99
    percolation sweep --config config/threshold_sweep.yaml
"""

import click

from ..percolation.grid_percolation import InvalidArgument


@click.group()
@click.version_option(package_name='site_percolation')
def cli():
    """Site percolation - Monte Carlo estimate of the percolation threshold."""
    pass


@cli.command('stats')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=int, default=None, help='Random seed (default: fresh entropy)')
@click.option('--confidence', default=0.95, show_default=True,
              help='Confidence level for the interval')
def stats(n, trials, seed, confidence):
    """Run TRIALS experiments on an N-by-N grid and print threshold statistics."""
    from ..percolation.stats import PercolationStats

    try:
        ps = PercolationStats(n, trials, seed=seed, confidence=confidence)
    except InvalidArgument as e:
        raise click.BadParameter(str(e))

    level = f"{confidence * 100:g}%"
    click.echo(f"mean                    = {ps.mean()}")
    click.echo(f"stddev                  = {ps.stddev()}")
    click.echo(f"{level} confidence interval = [{ps.confidence_lo()}, {ps.confidence_hi()}]")


@cli.command('sweep')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
@click.option('--quiet', '-q', is_flag=True, help='Only print the final summary')
def sweep(config_path, quiet):
    """Estimate the threshold for every grid size in a run config."""
    from ..run.manifest import RunConfig
    from ..percolation.analysis import run_sweep_from_config, print_sweep_summary

    try:
        config = RunConfig.from_yaml(config_path)
    except InvalidArgument as e:
        raise click.BadParameter(str(e), param_hint='--config')
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(f"Run: {config.run_name}")
    if config.description:
        click.echo(f"  {config.description}")
    click.echo(f"Grid sizes: {config.grid_sizes}, trials: {config.trials}, seed: {config.seed}")

    df = run_sweep_from_config(config, verbose=not quiet)
    print_sweep_summary(df, confidence=config.confidence)


if __name__ == '__main__':
    cli()
