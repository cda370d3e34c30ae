from setuptools import setup, find_packages

setup(
    name="passcal",
    version="0.1.0",
    description="Export satellite pass predictions as iCalendar files",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"passcal": ["py.typed"]},
    python_requires=">=3.11",
    install_requires=[
        'icalendar>=5.0.0',
        'PyYAML>=6.0',
        'typing_extensions>=4.0.0',
        'tzdata'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'coverage>=7.0'
        ]
    }
)
