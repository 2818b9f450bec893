from __future__ import annotations

from char_lm import LanguageModel


def main() -> None:
    text = (
        "a window slides over the text, one character at a time. "
        "each window remembers which characters came next, "
        "and the model samples from those counts to write new text. "
    )

    model = LanguageModel(window_length=4, seed=20)
    model.train(text)
    print(model)
    print(model.generate("a wi", 120))


if __name__ == "__main__":
    main()
