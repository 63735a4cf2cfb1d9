"""Static language tables shipped with the application.

Codes follow the AWS Translate language codes so both gateways can share them.
"""

from .language import Language, LanguageCatalog

SUPPORTED_LANGUAGES = (
    Language("af", "Afrikaans"),
    Language("sq", "Albanian"),
    Language("am", "Amharic"),
    Language("ar", "Arabic"),
    Language("hy", "Armenian"),
    Language("az", "Azerbaijani"),
    Language("bn", "Bengali"),
    Language("bs", "Bosnian"),
    Language("bg", "Bulgarian"),
    Language("ca", "Catalan"),
    Language("zh", "Chinese (Simplified)"),
    Language("zh-TW", "Chinese (Traditional)"),
    Language("hr", "Croatian"),
    Language("cs", "Czech"),
    Language("da", "Danish"),
    Language("fa-AF", "Dari"),
    Language("nl", "Dutch"),
    Language("en", "English"),
    Language("et", "Estonian"),
    Language("fa", "Persian"),
    Language("tl", "Filipino"),
    Language("fi", "Finnish"),
    Language("fr", "French"),
    Language("fr-CA", "French (Canada)"),
    Language("ka", "Georgian"),
    Language("de", "German"),
    Language("el", "Greek"),
    Language("gu", "Gujarati"),
    Language("ht", "Haitian Creole"),
    Language("ha", "Hausa"),
    Language("he", "Hebrew"),
    Language("hi", "Hindi"),
    Language("hu", "Hungarian"),
    Language("is", "Icelandic"),
    Language("id", "Indonesian"),
    Language("ga", "Irish"),
    Language("it", "Italian"),
    Language("ja", "Japanese"),
    Language("kn", "Kannada"),
    Language("kk", "Kazakh"),
    Language("ko", "Korean"),
    Language("lv", "Latvian"),
    Language("lt", "Lithuanian"),
    Language("mk", "Macedonian"),
    Language("ms", "Malay"),
    Language("ml", "Malayalam"),
    Language("mt", "Maltese"),
    Language("mr", "Marathi"),
    Language("mn", "Mongolian"),
    Language("no", "Norwegian"),
    Language("ps", "Pashto"),
    Language("pl", "Polish"),
    Language("pt", "Portuguese (Brazil)"),
    Language("pt-PT", "Portuguese (Portugal)"),
    Language("pa", "Punjabi"),
    Language("ro", "Romanian"),
    Language("ru", "Russian"),
    Language("sr", "Serbian"),
    Language("si", "Sinhala"),
    Language("sk", "Slovak"),
    Language("sl", "Slovenian"),
    Language("so", "Somali"),
    Language("es", "Spanish"),
    Language("es-MX", "Spanish (Mexico)"),
    Language("sw", "Swahili"),
    Language("sv", "Swedish"),
    Language("ta", "Tamil"),
    Language("te", "Telugu"),
    Language("th", "Thai"),
    Language("tr", "Turkish"),
    Language("uk", "Ukrainian"),
    Language("ur", "Urdu"),
    Language("uz", "Uzbek"),
    Language("vi", "Vietnamese"),
    Language("cy", "Welsh"),
)

RTL_LANGUAGES = frozenset({"ar", "fa", "fa-AF", "he", "ps", "ur"})


def default_catalog() -> LanguageCatalog:
    """Catalog built from the bundled tables."""
    return LanguageCatalog(SUPPORTED_LANGUAGES, RTL_LANGUAGES)
