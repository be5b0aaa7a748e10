#!/usr/bin/env python3
"""
Smoke test script for a running docseal server.
Runs encrypt -> decrypt -> sign -> verify round trips on sample documents,
then checks that malformed requests are rejected.
"""

import json

import requests
from colorama import Fore, Style, init

# Configuration
BASE_URL = "http://127.0.0.1:8080"

SAMPLE_DOCUMENTS = {
    "test1": {
        "array of sun": [{"bonjour": "heyo"}, {"hoi": "NUUUU"}, "a doe a deer"],
        "comment ça va?": "très bien",
        "nest me an egg": {
            "abcd": [{"one": "a"}, {"two": "b"}, {"three": "c"}],
        },
    },
    "test2": {
        "comment ça va?": "très bien",
        "nest me an double": {
            "abcd": [{"one": ["two", "three", {"four": {"five": "six"}}]}],
        },
    },
    "test3": {"nice": "to meet you"},
}


def passed(message):
    print(f"{Fore.GREEN}{message}{Style.RESET_ALL}")


def failed(message):
    print(f"{Fore.RED}{message}{Style.RESET_ALL}")


def post(path, body, params=None):
    return requests.post(
        f"{BASE_URL}{path}",
        data=body.encode("utf-8"),
        params=params,
        headers={"Content-Type": "application/json"},
    )


def test_encrypt(document):
    response = post("/encrypt", json.dumps(document), params={"policy": "depth_1"})
    encrypted = response.json()
    if not all(isinstance(value, str) for value in encrypted.values()):
        raise AssertionError("not every first level value is a string in encryption")
    return encrypted


def test_decrypt(encrypted, document):
    response = post("/decrypt", json.dumps(encrypted))
    if response.json() != document:
        raise AssertionError("decrypted document differs from the original")


def test_signature(document):
    response = post("/sign", json.dumps(document))
    signature = response.json().get("signature")
    if not isinstance(signature, str):
        raise AssertionError("missing signature field in signature response")
    return signature


def test_verification(encrypted, signature):
    response = post("/verify", json.dumps({"data": encrypted, "signature": signature}))
    if response.status_code != 204:
        raise AssertionError(f"verification failed: {response.status_code}")


def expect_rejection(name, path, body, detail):
    response = post(path, body)
    if response.status_code != 400:
        failed(f"{name}: expected 400, got {response.status_code}")
        return False
    received = response.json().get("detail")
    if received != detail:
        failed(f"{name}: expected {detail!r}, got {received!r}")
        return False
    passed(f"{name} passed")
    return True


def run_tests():
    print(f"{Style.BRIGHT}{Fore.BLUE}==== Running Positive Tests ===={Style.RESET_ALL}")
    for name, document in SAMPLE_DOCUMENTS.items():
        print(f"{Fore.BLUE}== Running test {name} =={Style.RESET_ALL}")
        encrypted = test_encrypt(document)
        passed("encryption passed")
        test_decrypt(encrypted, document)
        passed("decryption passed")
        signature = test_signature(document)
        passed("signature passed")
        test_verification(encrypted, signature)
        passed("verification passed")


def run_negative_tests():
    print(f"{Style.BRIGHT}{Fore.BLUE}==== Running Negative Tests ===={Style.RESET_ALL}")
    empty = "Expecting value: line 1 column 1 (char 0)"
    results = [
        expect_rejection("encrypting empty", "/encrypt", "", empty),
        expect_rejection("decrypting empty", "/decrypt", "", empty),
        expect_rejection(
            "signing invalid",
            "/sign",
            "abcdefg, this is not valid json, hijklmnop.",
            empty,
        ),
        expect_rejection(
            "verifying missing signature",
            "/verify",
            json.dumps({"data": "abcdefg"}),
            "missing signature",
        ),
    ]
    response = post("/encrypt", json.dumps(["hin", "hoi"]), params={"policy": "depth_1"})
    if response.json().get("detail") == "data must be a json map on the first level":
        passed("encrypting array first passed")
        results.append(True)
    else:
        failed(f"encrypting array first: got {response.text}")
        results.append(False)
    return all(results)


def main():
    init()
    print("🚀 Starting docseal smoke tests")

    run_tests()
    if run_negative_tests():
        print("\n✅ Tests completed!")
    else:
        print("\n❌ Some negative tests failed")


if __name__ == "__main__":
    main()
