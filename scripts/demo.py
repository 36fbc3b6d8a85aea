"""Walk through the main features using the dictionaries in data/i18n."""
from pathlib import Path

import i18nx
from i18nx import t

DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "i18n"


def main() -> None:
    # Positional arguments
    print(t("I'd rather be {1} than {0}", "right", "happy"))

    # Locale can be set before or after loading
    i18nx.set_locale("ru")

    i18nx.load_yaml((DATA_DIR / "demo.yaml").read_text(encoding="utf-8"))
    # One file per locale works too
    i18nx.load_yaml((DATA_DIR / "demo.cn.yaml").read_text(encoding="utf-8"), locale="cn")
    i18nx.load_yaml((DATA_DIR / "demo.ru.yaml").read_text(encoding="utf-8"), locale="ru")
    print(i18nx.get_dictionary().snapshot())

    print(t("Hello {name}!", name="Rustaceans"))

    # Drop translations and unset the locale
    i18nx.reset()
    i18nx.clear_locale()
    print(i18nx.get_dictionary().snapshot())
    print(t("Hello {name}!", name="Rustaceans"))


if __name__ == "__main__":
    main()
