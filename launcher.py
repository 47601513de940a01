#!/usr/bin/python3

# python3 launcher.py loader -action=upload -file=... (remaining args go to the runner)

import sys
from importlib import import_module

mod = import_module(sys.argv[1] + '.' + sys.argv[1])
run = getattr(mod,'run')

run(sys.argv[2:])
