"""
# Genes and gene panels

Genes are keyed by their Entrez id and looked up by Hugo symbol. They are
imported once and only read afterwards.

A gene panel is a curated set of genes used to scope a sequencing assay. Each
panel has a stable id and a description.

Samples are profiled by genetic profiles; a (sample, profile) pair may record
the gene panel the sample was sequenced with.

Model managers play the role of mappers: every query the repositories and
services need lives on a manager method.
"""

from .gene import Gene  # noqa
from .genepanel import GenePanel  # noqa
from .sample import Sample  # noqa
from .sample import GeneticProfile  # noqa
from .sample import SampleProfile  # noqa
