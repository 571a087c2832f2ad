#!/usr/bin/env python

from setuptools import setup

setup(name="cuesheet",
	version="1.0.0",
	description="Cue sheet parser and validator",
	packages=["cuesheet"],
	python_requires=">=3.6",
	install_requires=["chardet"],
	extras_require={
		"test": ["pytest"],
	}
)
