#!/usr/bin/env python3
"""Generate API documentation automatically."""

import os
import sys
sys.path.insert(0, os.path.abspath('../..'))

from sphinx.ext.autosummary.generate import generate_autosummary_docs

# Modules whose docstrings make up the API reference
modules = [
    'digisurf',
    'digisurf.errors',
    'digisurf.topology',
    'digisurf.topology.khalimsky',
    'digisurf.topology.boundary',
    'digisurf.topology.tracker',
    'digisurf.topology.umbrella',
    'digisurf.topology.discovery',
    'digisurf.topology.surface_arrays',
]

output_dir = 'api'

for module in modules:
    generate_autosummary_docs(
        [module],
        output_dir=output_dir,
        suffix='.rst',
        base_path='.'
    )

print("API documentation generated for digisurf")
