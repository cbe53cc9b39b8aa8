from setuptools import setup, find_namespace_packages

setup(
    name="poker-hands",
    use_scm_version={'fallback_version': '0.1.0'},
    setup_requires=['setuptools_scm>6.0,<7'],
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest']
    },
    description="Five Card Poker Hand Evaluator",
    packages=find_namespace_packages(include=['titan.*', 'tests.*', 'scripts.*']),
    entry_points={
        'console_scripts': [
            'evaluate_poker_hands=scripts.titan.poker_hands.evaluate_poker_hands:main'
        ]
    }
)
