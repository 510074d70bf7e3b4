# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Default console used as the usage and error sink of a `FlagSet`."""
from rich.console import Console

console = Console(stderr=True, highlight=False)
