# chronos/__main__.py
# Allow `python -m chronos`

from .main import main

main()
