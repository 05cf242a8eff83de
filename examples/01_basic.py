"""
Basic usage - encrypt and decrypt with the default backend
"""
import crypttor


def main():
    key = b"\x01" * 32

    # Defaults: openssl backend, AES-256-CBC, raw bytes
    token = crypttor.encrypt("hello world", key)
    print(f"Framed ciphertext: {len(token)} bytes (16 IV + 16 data)")

    plaintext = crypttor.decrypt(token, key)
    print(f"Plaintext: {plaintext.decode()}")


if __name__ == "__main__":
    main()
