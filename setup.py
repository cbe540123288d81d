#!/usr/bin/env python3

# Prepare a release:
#
#  - git pull --rebase
#  - update version in setup.py and nullperf/__init__.py
#  - git commit -a -m "prepare release x.y"
#  - Remove untracked files/dirs: git clean -fdx
#  - run tests: python3 -m unittest discover -s nullperf/tests -t .
#  - git push or send the PR to the repository
#
# After the release:
#
#  - set version to n+1
#  - git commit -a -m "post-release"
#  - git push or send the PR to the repository

VERSION = '1.0.0'

DESCRIPTION = 'Measure the startup time of programming language runtimes'
CLASSIFIERS = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: MIT License',
    'Natural Language :: English',
    'Operating System :: POSIX',
    'Programming Language :: Python :: 3',
    'Topic :: Software Development :: Testing',
    'Topic :: System :: Benchmark',
]


# put most of the code inside main() to be able to import setup.py in
# test_misc.py, to ensure that VERSION is the same than
# nullperf.__version__.
def main():
    from setuptools import setup

    with open('README.rst') as fp:
        long_description = fp.read().strip()

    options = {
        'name': 'nullperf',
        'version': VERSION,
        'license': 'MIT license',
        'description': DESCRIPTION,
        'long_description': long_description,
        'long_description_content_type': 'text/x-rst',
        'classifiers': CLASSIFIERS,
        'packages': ['nullperf', 'nullperf.tests'],
        'python_requires': '>=3.7',
        'install_requires': [],
        'extras_require': {
            'test': ['pytest'],
        },
        'entry_points': {
            'console_scripts': ['nullperf=nullperf.__main__:main']
        }
    }
    setup(**options)


if __name__ == '__main__':
    main()
