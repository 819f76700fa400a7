from openhue.cli import cli

cli(prog_name='openhue')
