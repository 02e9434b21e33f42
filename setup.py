from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'freelan-config',
    version = '1.0.0',
    url = 'https://github.com/freelan-developers/freelan',
    description = 'Configuration resolution for freelan peer-to-peer VPN nodes',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov'],
    },
    entry_points = {
        'console_scripts': ['freelan = freelan.cli:main'],
    },
)
