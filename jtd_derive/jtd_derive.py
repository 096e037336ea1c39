import json
import logging

import click

from .cli_utils import load_target, reconstruct_command_line
from .config import DeriveConfig, NamingStrategy
from .docs import render_markdown
from .errors import DeriveError
from .pipeline import Generator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--naming", default=None, type=click.Choice([s.value for s in NamingStrategy]))
@click.option(
    "--prefer-inline",
    is_flag=True,
    default=False,
    help="Inline user types instead of emitting definitions (recursive types still get one)",
)
@click.option("--format", "-f", "output_format", default="json", type=click.Choice(["json", "markdown"]))
@click.option("--indent", default=2, type=int)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("target", type=str)
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def jtd_derive(config, naming, prefer_inline, output_format, indent, verbose, target, output):
    """Derive the JSON Typedef schema of TARGET (``package.module:Type``)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = DeriveConfig.from_dict(json.load(f))
    else:
        config = DeriveConfig()

    # CLI flags override the config file
    if naming is not None:
        config.naming = NamingStrategy(naming)
    if prefer_inline:
        config.prefer_inline = True

    tp = load_target(target)
    try:
        root = Generator(config).root_schema(tp)
    except DeriveError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "markdown":
        command_line = reconstruct_command_line(jtd_derive) if config.add_generation_comment else None
        title = target.partition(":")[2]
        out = render_markdown(root, title, command_line)
    else:
        out = root.to_json(indent=indent if indent > 0 else None) + "\n"

    if output is None:
        click.echo(out, nl=False)
    else:
        with open(output, "w") as f:
            f.write(out)
