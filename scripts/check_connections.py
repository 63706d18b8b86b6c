#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify MongoDB and the local Ollama server are reachable.
Usage: python scripts/check_connections.py
"""
import sys

from career_advisor.db.mongodb import test_mongo_connection
from career_advisor.services.ollama_client import OllamaClient
from career_advisor.core.config import get_settings


def main() -> int:
    settings = get_settings()
    print("=" * 50)
    print("CAREER ADVISOR - CONNECTION CHECK")
    print("=" * 50)

    failures = 0

    print("\n[1] Checking MongoDB...")
    print(f"    Database: {settings.mongodb_db}")
    if test_mongo_connection():
        print("    MongoDB: CONNECTED")
    else:
        print("    MongoDB: FAILED")
        failures += 1

    print("\n[2] Checking Ollama...")
    print(f"    Base URL: {settings.ollama_base_url}")
    print(f"    Model: {settings.ollama_model}")
    if OllamaClient(settings).test_connection():
        print("    Ollama: CONNECTED")
    else:
        print("    Ollama: FAILED")
        failures += 1

    print("\n" + "=" * 50)
    print("Connection check complete!" if not failures else f"{failures} check(s) failed")
    print("=" * 50)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
