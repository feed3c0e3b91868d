import sys

from rsa_roundtrip.roundtrip import main

if __name__ == "__main__":
    sys.exit(main())
