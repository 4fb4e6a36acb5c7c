"""
modelwarp CLI

Commands:
    guess       Show candidate logical model types for each column of a file
    describe    Pick a type per column and save a model description
"""
import logging

import click

from modelwarp.cli.describe import describe_command
from modelwarp.cli.guess import guess_command
from modelwarp.config import Settings


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log scan details')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """modelwarp - guess logical data models from tabular files"""
    settings = Settings.from_env()
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


cli.add_command(guess_command)
cli.add_command(describe_command)


if __name__ == '__main__':
    cli()
