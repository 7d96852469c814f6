"""
Setup script for the strict-coerce package.
"""

from setuptools import setup, find_packages
import os

# Read the README file for long description
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "strict-coerce: conservative coercion of dynamic values"

requirements = [
    'numpy>=1.24.0',  # NumPy scalars are classified alongside Python numbers
]

# Development requirements
dev_requirements = [
    'pytest>=6.0.0',
]

setup(
    name='strict-coerce',
    version='0.1.0',
    description='Strict, lossless coercion of dynamic values to str, int, float, bool and dict keys',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='strict-coerce Development Team',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        'dev': dev_requirements,
        'test': dev_requirements,
        'all': requirements + dev_requirements,
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='coercion, validation, type conversion, form input',
    include_package_data=True,
    zip_safe=False,
)
