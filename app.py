#!/usr/bin/env python3
from wpfx.cli import main

if __name__ == "__main__":
    main()
