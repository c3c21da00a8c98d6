#!/usr/bin/python3
from setuptools import setup

# read the version of the package
with open('l1robust/version.py') as f:
    code = compile(f.read(), "l1robust/version.py", 'exec')
    exec(code, globals(), locals())

setup(
    name='l1robust',
    version=version,
    author='Marek Petrik',
    author_email='marekpetrik@gmail.com',
    packages=['l1robust','l1robust.test'],
    scripts=[],
    url='',
    license='LICENSE',
    description='Worst-case expectations over L1 and weighted L1 balls for robust optimization and robust MDPs',
    install_requires=[
        "numpy >= 1.8.0",
        "scipy >= 1.6.0"
    ],
    extras_require={
        "test": ["pytest"]
    }
)
