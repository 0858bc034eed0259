import re

from setuptools import find_packages, setup


def read_version():
    with open('fibheap/version.py') as f:
        return re.search(r"__version__ = '([^']+)'", f.read()).group(1)


setup(name='fibheap',
      version=read_version(),
      description='Fibonacci heap with decrease-key and union, '
      'plus the graph algorithms built on it',
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.10',
      install_requires=['numpy', 'treelib'],
      extras_require={'test': ['pytest']})
