from hat.doit.common import *  # NOQA

from pathlib import Path


build_dir = Path('build')
docs_dir = Path('docs')
pytest_dir = Path('test_pytest')
src_py_dir = Path('src_py')
