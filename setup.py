"""Setup script for the UAsset Outline package."""

from setuptools import setup, find_packages

package_name = 'uasset_outline'


setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    package_data={
        f'{package_name}.config': ['*.yaml'],
    },
    install_requires=[
        'setuptools',
        'aiohttp>=3.8.0',
        'pyyaml>=6.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'black>=23.0.0',
            'isort>=5.12.0',
            'mypy>=1.0.0',
            'flake8>=6.0.0',
        ],
        'test': [
            'pytest>=7.0.0',
        ],
    },
    zip_safe=True,
    maintainer='UAsset Outline Team',
    maintainer_email='maintainer@example.com',
    description='Read-only outline decoder for Unreal Engine .uasset packages',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'uasset_outline = uasset_outline.cli:main',
            'uasset_outline_server = uasset_outline.webserver:main',
        ],
    },
    python_requires='>=3.10',
)
