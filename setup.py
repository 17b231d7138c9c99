#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="pygopherclient",
    version="1.0.0",
    description="Internet Gopher (RFC 1436) menu client",
    author="Michael Lazar",
    author_email="lazar.michael22@gmail.com",
    python_requires=">=3.7",
    packages=["pygopherclient"],
    scripts=["bin/pygopherclient"],
    test_suite="tests",
    license="GPLv2",
)
