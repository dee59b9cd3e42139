# Import main lazily so library users don't pull in click
def __getattr__(name):
    if name == "main":
        from ledgerview.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
