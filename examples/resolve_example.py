#!/usr/bin/env python3
"""Resolve Example - Show the TLS trust settings for a host."""

import sys

from host_trust import CertPoolBuilder, Configuration, VerificationPolicy
from host_trust.resolver import find_instruction


def main():
    host = sys.argv[1] if len(sys.argv) > 1 else "github.com"
    print(f"=== TLS trust for {host} ===\n")

    config = Configuration.from_environment()

    # Verification
    print("1. Checking certificate verification...")
    if VerificationPolicy(config).is_disabled(host):
        print("   ✗ Verification DISABLED\n")
        return
    print("   ✓ Verification enabled\n")

    # Configured CA source
    print("2. Looking for a configured CA source...")
    instruction = find_instruction(config, host)
    if instruction is None:
        print("   • None configured\n")
    else:
        print(f"   ✓ {instruction.kind} {instruction.path} (from {instruction.source})\n")

    # Final pool
    print("3. Resolving trust pool...")
    pool = CertPoolBuilder(config).resolve(host)
    if pool is None:
        print("   • Using default system roots")
    else:
        print(f"   ✓ Trusting {len(pool)} certificates:")
        for cert in pool:
            print(f"     - {cert.subject.rfc4514_string()}")


if __name__ == "__main__":
    main()
