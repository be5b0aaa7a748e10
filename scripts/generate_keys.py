# generate_keys.py
from pathlib import Path

from docseal.core import load_or_generate
from docseal.shared import load_config

config = load_config()


def generate_keys(public_path: Path, private_path: Path, bits: int, force: bool):
    if force:
        public_path.unlink(missing_ok=True)
        private_path.unlink(missing_ok=True)
        print(f"[!] Removed existing key files {public_path}, {private_path}")

    keys = load_or_generate(public_path, private_path, bits)
    print(f"[✔] Key pair ready ({keys.public_key.key_size} bits)")
    print(keys.public_pem().decode())


if __name__ == "__main__":
    import argparse

    def parse_args():
        parser = argparse.ArgumentParser(
            description="Load the server key pair, generating it if needed"
        )
        parser.add_argument(
            "--public",
            type=Path,
            default=Path(config.keys.public_path),
            help=f"Public key PEM file (default: {config.keys.public_path})",
        )
        parser.add_argument(
            "--private",
            type=Path,
            default=Path(config.keys.private_path),
            help=f"Private key PKCS#8 PEM file (default: {config.keys.private_path})",
        )
        parser.add_argument(
            "--bits", type=int, default=config.keys.bits, help="RSA modulus size"
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Discard existing key files and generate a new pair",
        )
        return parser.parse_args()

    args = parse_args()
    generate_keys(args.public, args.private, args.bits, args.force)
