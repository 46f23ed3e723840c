"""
Entry for BCC
"""
import sys

from bcc.bcc_client import BCCClient


def main():
    client = BCCClient()
    return client.start()


if __name__ == "__main__":
    sys.exit(main())
