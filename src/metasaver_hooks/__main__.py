from metasaver_hooks.cli import cli

if __name__ == "__main__":
    cli()
