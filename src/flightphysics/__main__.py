"""Run with: python -m flightphysics"""
import sys

from flightphysics.main import main

sys.exit(main())
