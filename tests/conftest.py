import matplotlib

matplotlib.use('Agg')

import pytest

from litmine.corpus import corpus_from_mapping


@pytest.fixture
def novels():
    return corpus_from_mapping({
        'emma': [
            'EMMA',
            'Chapter 1',
            'Emma Woodhouse, handsome, clever, and rich, was happy.',
            'Her father was a nervous man; Emma was happy with him.',
            'Chapter 2',
            'Mr. Knightley was not happy; Emma had been wrong.',
        ],
        'persuasion': [
            'PERSUASION',
            'Chapter 1',
            'Sir Walter Elliot never took up any book but the Baronetage.',
            'Anne was sad, and Captain Wentworth was proud.',
            'Chapter 2',
            'Anne was happy at last, and Captain Wentworth was not proud.',
        ],
    })


@pytest.fixture
def stopwords():
    return frozenset(['the', 'a', 'and', 'was', 'her', 'him', 'with', 'had', 'been',
                      'up', 'any', 'but', 'at', 'not', 'never', 'mr'])
