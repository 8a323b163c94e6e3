#!/usr/bin/env python

from setuptools import setup

setup(name="cuesheet",
	version="0.1.0",
	description="Cue sheet parser and checker",
	packages=["cuesheet"],
	python_requires=">=3.6",
	install_requires=["chardet", "mutagen"],
	extras_require={
		"test": ["pytest"],
	},
	entry_points={
		"console_scripts": ["cuecheck = cuesheet.cli:main"],
	}
)
