#!/usr/bin/env python
'''Setuptools params'''

from setuptools import setup, find_packages

setup(
    name='edksp',
    version='0.1.0',
    description='k edge-disjoint shortest paths routing through an LP solver',
    author='Eugene Lee',
    author_email='Eugene Lee, 460893751@qq.com',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['edksp'],
    long_description="""\
Traffic engineering routing: for every demand pair, an LP asks the solver
(gurobi_cl, or CPLEX in process) for k edge-disjoint shortest paths under
unit link capacity, and the per-edge flows are decomposed back into paths.
      """,
      classifiers=[
          "License :: OSI Approved :: GNU General Public License (GPL)",
          "Programming Language :: Python :: 3",
          "Development Status :: 4 - Beta",
          "Intended Audience :: Developers",
          "Topic :: Internet",
      ],
      keywords='networking routing traffic engineering linear programming',
      license='GPL',
      python_requires='>=3.6',
      install_requires=[
        'setuptools',
        'networkx'
      ],
      extras_require={
        'cplex': ['cplex'],
        'test': ['pytest']
      })
