"""
Entity Linking Core

Finds named-entity mentions in prose and decides which of them become links,
linking only the first occurrence of each entity per page. The core is pure:
no parser, no network, no settings. Hosts plug their tree type in through
TreeAdapter.

Architecture:
-----------
- extraction_passes.py / candidates.py: regex pass strategies folded into one candidate list
- candidate_filter.py: deny-list and minimum-length filter
- resolver.py: catalogue matching, overlap and false-positive rules
- skip_rules.py: which parts of a content tree may be linked
- injector.py: tree walk, first-occurrence ledger, link splicing
- discovery.py: two-phase discover-then-relocate pipeline

Usage:
------
from src.linking import EntityCatalogue, EntityResolver

resolver = EntityResolver(EntityCatalogue(["Barack Obama", "New York City"]))
matches = resolver.find_matches("the reporter met Barack Obama in New York City.")
"""

from .candidate_filter import CandidateFilter, is_skip_word, meets_min_length, trim_fillers
from .candidates import CandidateExtractor
from .catalogue import EntityCatalogue
from .diagnostics import DiagnosticTrace, RejectionReason
from .discovery import (
    MODE_SINGLE_PHASE,
    MODE_TWO_PHASE,
    ArticleExtract,
    ArticleExtractor,
    LinkingResult,
    TwoPhaseLinker,
)
from .extraction_passes import (
    AcronymPass,
    ExtractionPass,
    FrugalPass,
    GreedyPass,
    SingleWordPass,
    default_passes,
)
from .injector import InjectionCoordinator, InjectionResult, LinkSegment, TreeAdapter
from .models import LinkRecord, Match, OccurrenceLedger, SkipOutcome
from .resolver import EntityResolver, is_part_of_larger_phrase, is_sentence_start, normalise_curly_quotes
from .skip_rules import CallbackInspector, NodeInspector, SkipRuleClassifier
from .urls import extract_context, to_wiki_url

__all__ = [
    # Candidates
    'CandidateExtractor',
    'CandidateFilter',
    'ExtractionPass',
    'GreedyPass',
    'FrugalPass',
    'SingleWordPass',
    'AcronymPass',
    'default_passes',
    'is_skip_word',
    'meets_min_length',
    'trim_fillers',
    # Matching
    'EntityCatalogue',
    'EntityResolver',
    'Match',
    'is_part_of_larger_phrase',
    'is_sentence_start',
    'normalise_curly_quotes',
    # Diagnostics
    'DiagnosticTrace',
    'RejectionReason',
    # Tree rules and injection
    'NodeInspector',
    'CallbackInspector',
    'SkipRuleClassifier',
    'SkipOutcome',
    'TreeAdapter',
    'LinkSegment',
    'InjectionCoordinator',
    'InjectionResult',
    'OccurrenceLedger',
    'LinkRecord',
    'extract_context',
    'to_wiki_url',
    # Two-phase
    'ArticleExtract',
    'ArticleExtractor',
    'TwoPhaseLinker',
    'LinkingResult',
    'MODE_TWO_PHASE',
    'MODE_SINGLE_PHASE',
]
