from lightwave.cli.app import run

run()
