"""
Legacy backend - mcrypt conventions through pycryptodome
"""
from Crypto.Random import get_random_bytes

from crypttor import CryptConfig, MCryptStrategy


def main():
    print("Algorithms:", ", ".join(MCryptStrategy.supported_algorithms()))
    print("Modes:", ", ".join(MCryptStrategy.supported_modes("blowfish")))

    config = CryptConfig.legacy(algorithm="blowfish", mode="ctr", format="hex")
    crypt = config.build(get_random_bytes(56))

    token = crypt.encrypt("legacy payload")
    print(f"Token: {token}")
    print(f"Plaintext: {crypt.decrypt(token).decode()}")

    # Trailing NUL bytes do not survive the legacy backend
    print(crypt.decrypt(crypt.encrypt(b"data\x00\x00")))


if __name__ == "__main__":
    main()
