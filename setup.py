from setuptools import setup

setup(
  name='table2tree',
  version='0.1.0',
  description='compile complete decision tables into minimal binary decision trees',
  packages=['table2tree'],
  python_requires='>=3.8',
  install_requires=[
    'numpy',
    'scipy',
    'pandas',
    'scikit-learn',
  ],
  extras_require={
    'test': ['pytest'],
  },
)
