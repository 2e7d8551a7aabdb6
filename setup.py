# coding: utf-8
# Copyright 2026 The Runefinder Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import os
import re
from setuptools import setup


def runefinder_version():
    with open(os.path.join('Lib', 'runefinder', '__init__.py')) as f:
        return re.search(r'^__version__ = "(.+)"', f.read(), re.M).group(1)


def runefinder_scripts():
    return [os.path.join('bin', f) for f in os.listdir('bin')]

# Read the contents of the README file
with open('README.md') as f:
    long_description = f.read()

setup(
    name="runefinder",
    version=runefinder_version(),
    description='Find Unicode characters by name',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Runefinder Authors',
    package_dir={'': 'Lib'},
    packages=['runefinder',
              'runefinder.scripts'],
    scripts=runefinder_scripts(),
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Topic :: Text Processing',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3'
    ],
    python_requires=">=3.8",
    extras_require={"test": ['pytest']},
    install_requires=[
        'requests',
        'rich',
    ]
    )
