"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

from opsuccess.generator import main


if __name__ == "__main__":
    main()
