# vocabdrill

A full-screen terminal flashcard drill for English vocabulary.

Each card shows an English word with an example sentence in brackets. Words
in the sentence that have the same base form as the card's word are shown in
bold and underlined. For example, "ate" is marked when the card is "eat", and
"children" is marked when the card is "child". Press Enter to reveal the
Japanese translation.

On macOS the word is also read aloud with `say -v Samantha`. If a new word
comes up while the last one is still being spoken, that speech is stopped.
Speech is off on other systems.

## Installation

```
pip install .
```

## Word list

Words are kept in a JSON array, which is `words.json` by default:

```json
[
  {
    "english": "eat",
    "example": "I ate an apple.",
    "japanese": "食べる"
  },
  {
    "english": "child",
    "example": "The children are playing.",
    "japanese": "子供",
    "skip": false
  }
]
```

`english`, `example` and `japanese` must be strings. `skip` is optional and
defaults to `false`. A word whose `skip` is `true` is treated as memorized and
is not asked again. If the file cannot be read, is not valid JSON, or an entry
is malformed, the error is logged and the command exits with status 1.

## Usage

```
vocabdrill
vocabdrill --file my-words.json
vocabdrill -f my-words.json
vocabdrill --version
```

The words that are not yet memorized are asked in random order. A progress
counter such as `3 / 20` is shown at the top of the screen, and a key summary
is shown at the bottom right.

Keys while a word is shown:

- `Enter`: reveal the translation. After that, `Enter` goes to the next word,
  `m` marks the word as memorized and `q` quits.
- `m`: mark the word as memorized and go to the next word.
- `q`: quit.

Other keys are ignored. When the session ends, whether by quitting or by going
through every word, the list is written back to the word file with the
updated `skip` marks.

If every word in the file is already memorized, you are asked first to press
`r` or `q`. `r` clears all the marks, saves the file and starts a drill. `q`
quits without changing the file.

## Using the pieces from Python

- `vocabdrill.words`: `Word` (with `from_dict` and `to_dict`), `load_words`,
  `save_words`, `pending_indices`, `reset_skips` and `WordFileError`.
- `vocabdrill.dictionary.Dictionary`: `get_base_form(word)` returns the base
  form of a word, for example `"ran"` → `"run"` and `"cats"` → `"cat"`. It
  returns the word itself when it is already a base form, and `None` for an
  empty string. You can pass extra irregular forms as a mapping, for example
  `Dictionary({"mice": "mouse"})`.
- `vocabdrill.stylist`: `split_example` splits a sentence into words and
  single other characters. `style_example` returns a list of `StyledText`
  pieces with the matching words marked.
- `vocabdrill.styled_text`: `Color`, `Style`, `StyledText`,
  `render_styled_text`, `print_styled_text` and `print_styled_texts`, which
  produce ANSI-styled output.
- `vocabdrill.speaker.Speaker`: `speak(text)` and `stop()`. It can also be used
  as a context manager.

## Limitations

Base forms come from built-in tables of irregular verbs and nouns together
with English suffix rules for endings such as -s, -es, -ed and -ing. Words
that have no dictionary or tagger behind them can therefore be missed or
matched wrongly. This applies mostly to uncommon irregular forms. Hyphenated
words are always treated as base forms.

## Running the tests

```
pip install ".[test]"
pytest
```