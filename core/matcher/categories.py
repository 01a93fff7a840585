#!/usr/bin/env python3
"""
Category tables for fuzzy preference matching.

Two free-text labels are "related" when they are equal after normalisation,
or when both fall into at least one shared category bucket. A label falls
into a bucket when it contains, or is contained by, any entry of that bucket.

The tables are compiled once into a CategoryIndex (entry -> category ids).
Each term is resolved to a category set once and cached, so comparing two
terms is a set intersection instead of a scan per comparison.
"""
from functools import lru_cache
from typing import Dict, FrozenSet, List, Mapping, Sequence


SKILL_CATEGORIES: Dict[str, List[str]] = {
    'programming_languages': [
        'python', 'java', 'c++', 'c#', 'javascript', 'typescript', 'ruby', 'php',
        'go', 'rust', 'swift', 'kotlin', 'scala', 'perl', 'r', 'matlab', 'vb', 'c'
    ],
    'web_development': [
        'react', 'angular', 'vue', 'node.js', 'express', 'django', 'flask', 'spring',
        'html', 'css', 'javascript', 'typescript', 'webpack', 'gulp', 'frontend',
        'backend', 'full-stack', 'mern', 'mean'
    ],
    'data': [
        'sql', 'nosql', 'mongodb', 'postgresql', 'mysql', 'firebase', 'elasticsearch',
        'data analysis', 'data science', 'python', 'r', 'tableau', 'power bi',
        'big data', 'hadoop', 'spark', 'database'
    ],
    'devops': [
        'docker', 'kubernetes', 'ci/cd', 'jenkins', 'gitlab', 'github actions',
        'terraform', 'ansible', 'aws', 'azure', 'gcp', 'devops', 'linux', 'bash'
    ],
    'cloud': [
        'aws', 'azure', 'gcp', 'google cloud', 'cloud computing', 'serverless',
        'lambda', 'cloud storage', 'docker', 'kubernetes'
    ],
    'ai_ml': [
        'machine learning', 'deep learning', 'tensorflow', 'pytorch', 'scikit-learn',
        'nlp', 'computer vision', 'ai', 'artificial intelligence', 'python', 'r',
        'keras', 'neural networks'
    ],
    'project_management': [
        'project management', 'agile', 'scrum', 'kanban', 'jira', 'asana',
        'leadership', 'team management', 'pmp'
    ],
    'marketing': [
        'marketing', 'digital marketing', 'seo', 'sem', 'content marketing',
        'social media', 'analytics', 'marketing automation', 'crm'
    ],
    'sales': [
        'sales', 'business development', 'account management', 'customer relations',
        'negotiation', 'crm', 'sales force'
    ],
    'design': [
        'ui design', 'ux design', 'graphic design', 'figma', 'sketch', 'adobe xd',
        'prototyping', 'wireframing', 'design thinking'
    ],
}

INDUSTRY_CATEGORIES: Dict[str, List[str]] = {
    'technology': [
        'technology', 'tech', 'software', 'it', 'information technology',
        'saas', 'cloud', 'cybersecurity'
    ],
    'finance': [
        'finance', 'fintech', 'banking', 'investment', 'accounting',
        'financial services', 'insurance'
    ],
    'healthcare': [
        'healthcare', 'health', 'medical', 'pharma', 'pharmaceutical',
        'biotech', 'wellness'
    ],
    'education': [
        'education', 'edtech', 'e-learning', 'training', 'academia',
        'university', 'school'
    ],
    'marketing': [
        'marketing', 'advertising', 'pr', 'communications',
        'brand', 'digital'
    ],
    'engineering': [
        'engineering', 'manufacturing', 'construction', 'infrastructure',
        'mechanical', 'civil', 'electrical'
    ],
    'retail': [
        'retail', 'ecommerce', 'e-commerce', 'shopping', 'commerce'
    ],
    'entertainment': [
        'entertainment', 'media', 'gaming', 'film', 'music', 'streaming',
        'content'
    ],
}

WORK_TYPE_ALTERNATIVES: Dict[str, List[str]] = {
    'remote': ['remote', 'work from home', 'distributed'],
    'on-site': ['on-site', 'office', 'in-person'],
    'hybrid': ['hybrid', 'flexible', 'remote-first'],
}


def normalize_term(term: str) -> str:
    """Lower-case and trim a label for comparison."""
    return term.lower().strip()


class CategoryIndex:
    """
    Inverted index over a category table (entry -> category ids).

    A term resolves to its categories through a substring scan over the
    distinct entries, memoized per normalised term.
    """

    def __init__(self, table: Mapping[str, Sequence[str]], cache_size: int = 4096):
        index: Dict[str, set] = {}
        for category, entries in table.items():
            for entry in entries:
                index.setdefault(normalize_term(entry), set()).add(category)

        self._index: Dict[str, FrozenSet[str]] = {
            entry: frozenset(categories) for entry, categories in index.items()
        }
        self.categories = frozenset(table.keys())
        self._lookup = lru_cache(maxsize=cache_size)(self._scan)

    def __len__(self) -> int:
        return len(self._index)

    def _scan(self, term: str) -> FrozenSet[str]:
        found = set()
        for entry, categories in self._index.items():
            if entry in term or term in entry:
                found.update(categories)
        return frozenset(found)

    def categories_of(self, term: str) -> FrozenSet[str]:
        """Return every category id the (normalised) term falls into."""
        normalized = normalize_term(term)
        if not normalized:
            return frozenset()
        return self._lookup(normalized)

    def related(self, first: str, second: str) -> bool:
        """True when the terms are equal or share at least one category."""
        a = normalize_term(first)
        b = normalize_term(second)
        if not a or not b:
            return False
        if a == b:
            return True
        return not self._lookup(a).isdisjoint(self._lookup(b))


SKILL_INDEX = CategoryIndex(SKILL_CATEGORIES)
INDUSTRY_INDEX = CategoryIndex(INDUSTRY_CATEGORIES)
WORK_TYPE_INDEX = CategoryIndex(WORK_TYPE_ALTERNATIVES)


def is_skill_related(first: str, second: str) -> bool:
    return SKILL_INDEX.related(first, second)


def is_industry_related(first: str, second: str) -> bool:
    return INDUSTRY_INDEX.related(first, second)


def is_work_type_related(first: str, second: str) -> bool:
    return WORK_TYPE_INDEX.related(first, second)
