import sys
from typing import Optional

import click

from . import __version__
from .errors import InputUnavailableError
from .input import open_input, read_hostnames
from .output import ConsoleOutput
from .resolve import DEFAULT_WORKERS, resolve_hostnames


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('-l', '--list', 'list_file', type=click.Path(),
              help='Path to the file containing the list of hostnames')
@click.option('-d', '--debug', is_flag=True,
              help='Enable debug output')
@click.option('-r', '--show-hostname', is_flag=True,
              help='Show original hostname in brackets')
@click.option('--pb', '--progress', 'progress', is_flag=True,
              help='Enable progress bar')
@click.option('-w', '--workers', default=DEFAULT_WORKERS, show_default=True,
              type=click.IntRange(min=1),
              help='Maximum concurrent lookups')
@click.version_option(version=__version__)
def main(list_file: Optional[str], debug: bool, show_hostname: bool,
         progress: bool, workers: int):
    """
    Resolve hostnames to unique, sorted IPv4 addresses.

    Hostnames are read from STDIN or from a file, one per line. A hostname
    is only kept if it has an A record and either no CNAME or a CNAME
    chain that stays on the same registrable domain as the hostname.

    Examples:

        cnay -l hostnames.txt

        echo 'www.example.com' | cnay

        cnay -r -l hostnames.txt
    """
    output = ConsoleOutput()
    output.setup_logging(debug=debug)

    try:
        stream = open_input(list_file)
    except InputUnavailableError as e:
        if not list_file:
            click.echo(click.get_current_context().get_help(), err=True)
        output.print_error(str(e))
        sys.exit(1)

    try:
        hostnames = list(read_hostnames(stream))
    finally:
        if list_file:
            stream.close()

    # Debug lines and the bar would interleave on stderr
    if progress and not debug:
        output.start_progress(len(hostnames))

    try:
        lines = resolve_hostnames(
            hostnames,
            show_hostname=show_hostname,
            workers=workers,
            on_result=output.on_result
        )
    except KeyboardInterrupt:
        output.print_warning("Interrupted")
        sys.exit(130)
    finally:
        output.stop_progress()

    output.print_results(lines)


if __name__ == '__main__':
    main()
