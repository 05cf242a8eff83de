"""
Transport formats - raw, base64 and hex
"""
import os

from crypttor import Crypt, Format, OpenSslStrategy


def main():
    strategy = OpenSslStrategy(os.urandom(32), algorithm="aes", mode="cfb")

    for fmt in Format:
        crypt = Crypt(strategy, fmt)
        token = crypt.encrypt("text-safe transport")
        print(f"{fmt.name:<7} {token!r}")
        assert crypt.decrypt(token) == b"text-safe transport"


if __name__ == "__main__":
    main()
