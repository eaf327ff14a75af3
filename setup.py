from setuptools import setup, find_packages
from setuptools.command.install import install
import os
import subprocess
import sys

def get_requirements():
    thelibFolder = os.path.dirname(os.path.realpath(__file__))
    requirementPath = thelibFolder + '/requirements.txt'
    if os.path.isfile(requirementPath):
        with open(requirementPath) as f:
            return [line for line in f.read().splitlines() if line and not line.startswith('#')]
    return []

class PostInstallCommand(install):
    """Post-installation command to generate the chart schemas"""
    def run(self):
        install.run(self)
        try:
            subprocess.check_call([sys.executable, '-c',
                'from chartschema.schema_generator import main; main()'])
            print("Chart schemas generated successfully")
        except Exception as e:
            print(f"Warning: Could not generate schemas: {e}")

setup(
    name='chartschema',
    version='0.1.0',
    description='Compact, depth-bounded JSON schemas compiled from chart option types',
    license='MIT',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.11',
    install_requires=get_requirements(),
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    entry_points={
        'console_scripts': [
            'chartschema=chartschema.cli.main:main',
            'chartschema-generate=chartschema.schema_generator:main',
        ]
    },
    cmdclass={
        'install': PostInstallCommand,
    }
)
