#!/usr/bin/env python3
"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

import os
import re
from pathlib import Path

from setuptools import find_packages, setup


class TempWorkDir:
    """Switches the working directory to be the one on which this file lives,
       while within the 'with' block.
    """
    def __init__(self, new=None):
        self.original = None
        self.new = new or str(Path(__file__).parent.resolve())

    def __enter__(self):
        self.original = str(Path('.').resolve())
        os.chdir(self.new)
        return self

    def __exit__(self, *args):
        os.chdir(self.original)


LIBRARY_DIR = Path('src/tl_signature')


def main():
    # Get the long description from the README file
    with open('README.rst', 'r', encoding='utf-8') as f:
        long_description = f.read()

    with open(LIBRARY_DIR / 'version.py', 'r', encoding='utf-8') as f:
        version = re.search(r"^__version__\s*=\s*'(.*)'.*$",
                            f.read(), flags=re.MULTILINE).group(1)
    setup(
        name='tl-signature',
        version=version,
        description="Type signature parser for TL schema compilers",
        long_description=long_description,

        license='MIT',

        python_requires='>=3.9',

        # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
        classifiers=[
            #   3 - Alpha
            #   4 - Beta
            #   5 - Production/Stable
            'Development Status :: 4 - Beta',

            'Intended Audience :: Developers',
            'Topic :: Software Development :: Code Generators',

            'License :: OSI Approved :: MIT License',

            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3.9',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
        ],
        keywords='telegram tl schema parser code generation',
        package_dir={'': 'src'},
        packages=find_packages('src'),
        install_requires=['typing_extensions'],
        extras_require={
            'test': ['pytest', 'hypothesis']
        }
    )


if __name__ == '__main__':
    with TempWorkDir():
        main()
