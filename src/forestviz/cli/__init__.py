"""Command line interface, installed with ``pip install forestviz[cli]``.

    forestviz render -n 2,6,7,1,5,3,9 -e 2-7,3-5,1-9,9-6 -s 1
    forestviz render -n 1,2,3 -e 1-2 -o graph.html
    forestviz serve --port 8000
"""

from __future__ import annotations


def create_app():
    """Build the typer application with the render and serve commands."""
    import typer

    from forestviz.cli.render_cmd import register_commands

    app = typer.Typer(
        name="forestviz",
        help="Draw a small graph and count its connected components.",
        no_args_is_help=True,
        add_completion=False,
    )
    register_commands(app)
    return app


def main():
    create_app()()
