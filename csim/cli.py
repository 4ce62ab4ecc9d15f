import logging

import click

from .config import CacheConfig
from .errors import ConfigError
from .replay import format_event, simulate
from .trace import open_trace

LOGGER = logging.getLogger(__name__)


class CsimCommand(click.Command):
    # Malformed invocations exit with status 1 rather than click's 2.
    def main(self, args=None, prog_name=None, **extra):
        extra.pop('standalone_mode', None)
        try:
            return super().main(args, prog_name, standalone_mode=False, **extra)
        except click.exceptions.Abort:
            click.echo('Aborted!', err=True)
            raise SystemExit(1)
        except click.ClickException as e:
            e.show()
            raise SystemExit(1)


def configure_logging(verbose):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')


def echo_event(event, outcomes):
    click.echo(format_event(event, outcomes))


@click.command(cls=CsimCommand, context_settings={'help_option_names': ['-h', '--help']})
@click.option('-v', '--verbose', is_flag=True, help='Optional verbose flag that displays trace info')
@click.option('-s', '--s', 'set_bits', type=int, required=True,
              help='Number of set index bits (S = 2^s is the number of sets)')
@click.option('-E', '--E', 'associativity', type=int, required=True,
              help='Associativity (number of lines per set)')
@click.option('-b', '--b', 'block_bits', type=int, required=True,
              help='Number of block bits (B = 2^b is the block size)')
@click.option('-t', '--trace_file', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Name of the valgrind trace to replay')
def main(verbose, set_bits, associativity, block_bits, trace_file):
    """Replay a valgrind memory trace against a simulated LRU cache."""
    configure_logging(verbose)
    LOGGER.info('trace file: %s', trace_file)
    try:
        config = CacheConfig.create(set_bits, associativity, block_bits)
    except ConfigError as e:
        raise click.UsageError(str(e))
    click.echo(run(config, trace_file, verbose))


def run(config, trace_file, verbose=False):
    with open_trace(trace_file) as operations:
        counters = simulate(config, operations,
                            listener=echo_event if verbose else None)
    return str(counters)


if __name__ == '__main__':
    main()
