"""
Sample block forests for testing.

Raw Gutenberg-style dicts (as returned by the block editor's getBlocks()):
- Single styled paragraph
- Image with media and dimension attributes
- Nested group/columns layout
- Forest with a malformed block (no name)
- Forest with a non-dict entry and a bad attribute map
- Already clean forest
"""

# Paragraph with one attribute of each common kind
STYLED_PARAGRAPH = {
    "clientId": "p-1",
    "name": "core/paragraph",
    "attributes": {
        "content": "hi",
        "backgroundColor": "#fff",
        "className": "foo",
    },
    "innerBlocks": [],
}

# Image block: media keys plus dimension keys shared with customProperties
STYLED_IMAGE = {
    "clientId": "img-1",
    "name": "core/image",
    "attributes": {
        "url": "https://example.com/img.png",
        "alt": "x",
        "id": 42,
        "width": 640,
        "height": 480,
        "aspectRatio": "4/3",
        "caption": "A caption",
        "align": "wide",
        "className": "is-style-rounded",
        "style": {"border": {"radius": "8px"}},
    },
    "innerBlocks": [],
}

# group > columns > column > (heading, paragraph)
NESTED_GROUP = {
    "clientId": "g-1",
    "name": "core/group",
    "attributes": {
        "tagName": "section",
        "layout": {"type": "constrained"},
        "backgroundColor": "primary",
        "anchor": "intro",
    },
    "innerBlocks": [
        {
            "clientId": "cols-1",
            "name": "core/columns",
            "attributes": {"isStackedOnMobile": True, "style": {"spacing": {"blockGap": "2rem"}}},
            "innerBlocks": [
                {
                    "clientId": "col-1",
                    "name": "core/column",
                    "attributes": {"width": "50%", "verticalAlignment": "center"},
                    "innerBlocks": [
                        {
                            "clientId": "h-1",
                            "name": "core/heading",
                            "attributes": {"content": "Title", "level": 2, "textColor": "accent"},
                            "innerBlocks": [],
                        },
                        {
                            "clientId": "p-2",
                            "name": "core/paragraph",
                            "attributes": {"content": "Body", "dropCap": True, "fontSize": "large"},
                            "innerBlocks": [],
                        },
                    ],
                },
            ],
        },
    ],
}

# Three top-level blocks, the second one has no name
FOREST_WITH_MALFORMED = [
    {
        "clientId": "a",
        "name": "core/paragraph",
        "attributes": {"content": "one", "textColor": "red"},
        "innerBlocks": [],
    },
    {
        "clientId": "b",
        "attributes": {"content": "two", "className": "orphan"},
        "innerBlocks": [],
    },
    {
        "clientId": "c",
        "name": "core/paragraph",
        "attributes": {"content": "three"},
        "innerBlocks": [],
    },
]

# Structurally broken entries: a string in the list, attributes as a list
FOREST_WITH_BAD_SHAPES = [
    "not-a-block",
    {
        "clientId": "bad-attrs",
        "name": "core/paragraph",
        "attributes": ["content", "hi"],
        "innerBlocks": [],
    },
    {
        "clientId": "ok",
        "name": "core/quote",
        "attributes": {"value": "<p>q</p>", "citation": "me", "className": "big"},
        "innerBlocks": [],
    },
]

# Nothing to remove in any mode (Essential + unknown keys only)
CLEAN_FOREST = [
    {
        "clientId": "clean-1",
        "name": "core/paragraph",
        "attributes": {"content": "already clean", "data-plugin": "x"},
        "innerBlocks": [],
    },
]


SAMPLE_FORESTS = {
    "styled_paragraph": [STYLED_PARAGRAPH],
    "styled_image": [STYLED_IMAGE],
    "nested_group": [NESTED_GROUP],
    "with_malformed": FOREST_WITH_MALFORMED,
    "with_bad_shapes": FOREST_WITH_BAD_SHAPES,
    "clean": CLEAN_FOREST,
    "mixed": [STYLED_PARAGRAPH, STYLED_IMAGE, NESTED_GROUP],
}
