#!/usr/bin/env python3
"""vcard-pages — contact card site builder.  Run with:  python3 start.py [build options]"""
import sys
import os

script_dir = os.path.dirname(os.path.abspath(__file__))
src_dir    = os.path.join(script_dir, "src")

sys.path.insert(0, src_dir)
os.chdir(script_dir)

from vcard_pages.cli import app

# `python3 start.py` alone runs a build with the defaults
if len(sys.argv) == 1 or sys.argv[1].startswith("-"):
    sys.argv.insert(1, "build")
app()
