from bevshop.infrastructure.cli.main import cli

cli()
