"""Allow running as: python -m vaanibill"""

from .cli import main

main()
