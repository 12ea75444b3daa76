"""Fixture documents loaded by `python -m noteful.seed` and by the test suite."""

FOLDERS = [
    {"id": "111111111111111111111100", "name": "Archive"},
    {"id": "111111111111111111111101", "name": "Drafts"},
    {"id": "111111111111111111111102", "name": "Personal"},
    {"id": "111111111111111111111103", "name": "Work"},
]

TAGS = [
    {"id": "222222222222222222222200", "name": "breed"},
    {"id": "222222222222222222222201", "name": "hybrid"},
    {"id": "222222222222222222222202", "name": "domestic"},
    {"id": "222222222222222222222203", "name": "feral"},
]

NOTES = [
    {
        "id": "000000000000000000000000",
        "title": "5 life lessons learned from cats",
        "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
                   "Cats teach patience, curiosity and the value of a good nap.",
        "folder_id": "111111111111111111111100",
        "tags": ["222222222222222222222200"],
    },
    {
        "id": "000000000000000000000001",
        "title": "What the government doesn't want you to know about cats",
        "content": "Posuere sollicitudin aliquam ultrices sagittis orci a. "
                   "Feugiat sed lectus vestibulum mattis ullamcorper velit.",
        "folder_id": "111111111111111111111101",
        "tags": ["222222222222222222222201", "222222222222222222222203"],
    },
    {
        "id": "000000000000000000000002",
        "title": "The most boring article about cats you'll ever read",
        "content": "Nunc sed id semper risus in hendrerit gravida rutrum.",
        "folder_id": "111111111111111111111101",
        "tags": [],
    },
    {
        "id": "000000000000000000000003",
        "title": "7 things lady gaga has in common with cats",
        "content": "Both enjoy a dramatic entrance. Lady gaga and cats share a love "
                   "of costumes, naps and attention.",
        "folder_id": "111111111111111111111102",
        "tags": ["222222222222222222222202"],
    },
    {
        "id": "000000000000000000000004",
        "title": "The most incredible article about dogs you'll ever read",
        "content": "Dogs are loyal. This note mentions cats only in passing.",
        "folder_id": "111111111111111111111103",
        "tags": ["222222222222222222222202", "222222222222222222222203"],
    },
    {
        "id": "000000000000000000000005",
        "title": "10 ways cats can help you live to 100",
        "content": "Purring lowers blood pressure. Life is longer with a cat.",
        "folder_id": None,
        "tags": ["222222222222222222222200", "222222222222222222222202"],
    },
    {
        "id": "000000000000000000000006",
        "title": "Grocery list",
        "content": "Milk, eggs, coffee, kibble.",
        "folder_id": "111111111111111111111102",
        "tags": [],
    },
]
