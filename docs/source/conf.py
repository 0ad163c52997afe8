import os
import sys
sys.path.insert(0, os.path.abspath('../..'))
# Sphinx configuration of the digisurf API reference.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = 'digisurf'
copyright = '2026, digisurf developers'
author = 'digisurf developers'
release = '0.1.0'

extensions = ["numpydoc",
              'sphinx.ext.autodoc',
              'sphinx.ext.napoleon',
              'sphinx.ext.mathjax']

autosummary_generate = True
autosummary_generate_overwrite = False
autodoc_member_order = 'bysource'
numpydoc_show_class_members = False

# numpy style docstrings only
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_private_with_doc = False
napoleon_use_admonition_for_notes = True
napoleon_use_param = True
napoleon_use_rtype = True

templates_path = ['_templates']
exclude_patterns = ['api/*.tests*']

html_theme = 'alabaster'
html_static_path = ['_static']
html_title = 'digisurf: umbrella traversal of digital surfaces'


def setup(app):
    """Generate API docs before the build."""
    import subprocess
    subprocess.run(['python', 'generate_docs.py'], cwd=os.path.dirname(os.path.abspath(__file__)))
