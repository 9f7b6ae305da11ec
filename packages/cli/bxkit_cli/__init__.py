"""bxkit CLI - command line front end for bxkit_sdk."""

__version__ = "0.1.0"
