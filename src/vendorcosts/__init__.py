"""vendorcosts - what neighbors pay local service providers."""

__version__ = "0.1.0"


# main is resolved on first access so importing the package stays free of click
def __getattr__(name):
    if name == "main":
        from vendorcosts.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
