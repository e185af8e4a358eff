#!/usr/bin/env python3
"""
Main test runner for the pylox scanner tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

def run_smoke_test():
    """Scan a small program and print the token stream."""

    print("pylox Scanner Test Suite")
    print("=" * 60)

    try:
        from pylox.lexer.lexer import scan
    except ImportError as e:
        print(f"Failed to import scanner: {e}")
        return False

    code = """
    fun add(a, b) {
        return a + b;
    }
    print add(1, 2.5);
    """

    tokens, diagnostics = scan(code)
    print(f"  Generated {len(tokens)} tokens")
    for diagnostic in diagnostics:
        print(f"  {diagnostic}")
    print()

    return not diagnostics


def run_all_tests():
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    ok = run_smoke_test() and run_all_tests()
    sys.exit(0 if ok else 1)
