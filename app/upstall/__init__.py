"""upstall - safely install or upgrade binary crates installed with cargo."""

__version__ = "0.2.0"
