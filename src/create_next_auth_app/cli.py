"""Click command for create-next-auth-app."""

import sys

import click

from create_next_auth_app import __version__
from create_next_auth_app.errors import ScaffoldError
from create_next_auth_app.pipeline import ScaffoldPipeline
from create_next_auth_app.scaffold_opts import ScaffoldOpts


def scaffold(opts: ScaffoldOpts):
    """Run the pipeline for opts, exiting 1 on any scaffold failure."""
    pipeline = ScaffoldPipeline(opts.pipeline_deps())
    try:
        pipeline.run(opts.app_name, opts.database_url)
    except ScaffoldError as e:
        click.echo(f"Something went wrong: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("", err=True)
        click.echo("Scaffolding interrupted.", err=True)
        sys.exit(130)


@click.command("create-next-auth-app")
@click.version_option(__version__, prog_name="create-next-auth-app")
@click.argument("app_name")
@click.option("-d", "--db", "database_url", required=True, help="Database URL for Prisma.")
@click.option("--dry-run", is_flag=True, help="Print the commands and files without running or writing anything.")
def main(app_name, database_url, dry_run):
    """Bootstrap a Next.js app with Prisma, NextAuth, shadcn/ui, Tailwind and authentication."""
    scaffold(ScaffoldOpts(
        app_name=app_name,
        database_url=database_url,
        dry_run=dry_run,
    ))
