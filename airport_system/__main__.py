from .pipeline import run_demo

run_demo()
