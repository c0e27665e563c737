from setuptools import find_packages, setup

setup(
  name="primecurve",
  version="0.1.0",
  description="Prime field and elliptic curve arithmetic with ECDSA-style signatures",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
)
