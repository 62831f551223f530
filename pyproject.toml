[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Symmetric XOR, one-time-mask and CBC ciphers, and tools for cracking repeating-key XOR"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "xor",
    "one-time-pad",
    "cbc",
    "cryptanalysis",
    "frequency-analysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
break-code1 = "cryptolab.break_code1:main"
break-code2 = "cryptolab.break_code2:main"
break-code3 = "cryptolab.break_code3:main"

[tool.setuptools.packages.find]
include = ["cryptolab*"]

[tool.pytest.ini_options]
addopts = "-ra"
