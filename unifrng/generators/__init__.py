"""Uniform generator implementations, one per generator kind."""

from .base import BaseGenerator, clamp_unit, scramble
from .knuth_stream import KnuthStream, mod_diff
from .wichmann_hill import WichmannHillGenerator
from .marsaglia import MarsagliaMulticarryGenerator
from .super_duper import SuperDuperGenerator
from .mersenne_twister import MersenneTwisterGenerator
from .knuth_taocp import KnuthTAOCPGenerator, KnuthTAOCP2Generator
from .lecuyer import LecuyerCMRGGenerator
