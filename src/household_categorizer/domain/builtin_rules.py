"""
Default global rules shipped with the app.

Patterns are regexes written against normalized text: lower-case, no
accents, punctuation replaced by spaces. Households can override any of
them with their own rules at a higher priority.
"""

from household_categorizer.classifiers.rules import apply_rules
from household_categorizer.models import CategoryRule, ClassificationResult, Transaction

# (id, category, priority, pattern, confidence)
_DEFAULTS: tuple[tuple[str, str, int, str, float], ...] = (
    # Transport
    ("transport-uber-99", "transport", 100, r"\b(uber|99\s*pop|99\s*app|in\s*driver)\b", 0.95),
    ("transport-gas", "transport", 90, r"\b(posto|gasolina|combustivel|shell|ipiranga|br\s*distribuidora)\b", 0.9),
    ("transport-parking", "transport", 90, r"\b(estacionamento|sem\s*parar|parking|pedagio)\b", 0.9),
    ("transport-bus", "transport", 85, r"\b(onibus|metro|bilhete\s*unico)\b", 0.85),
    # Food
    ("food-ifood", "food", 100, r"\b(ifood|uber\s*eats|rappi)\b", 0.95),
    ("food-market", "food", 95, r"\b(supermercado|mercado|padaria|acougue|hortifruti|atacadao)\b", 0.9),
    ("food-restaurant", "food", 90, r"\b(restaurante|lanchonete|lanche|pizzaria|hamburgueria|cafe|confeitaria)\b", 0.85),
    ("food-delivery", "food", 85, r"\b(delivery|entrega)\b", 0.75),
    # Bills
    ("bills-rent", "bills", 95, r"\b(aluguel|condominio)\b", 0.95),
    ("bills-utils", "bills", 95, r"\b(luz|energia|agua|enel|cpfl|sabesp)\b", 0.9),
    ("bills-internet", "bills", 90, r"\b(internet|banda\s*larga|net\s*virtua|oi\s*fibra|vivo\s*fibra|claro\s*internet)\b", 0.9),
    ("bills-phone", "bills", 90, r"\b(telefone|celular|tim|vivo|claro|oi)\b", 0.85),
    # Health
    ("health-pharmacy", "health", 95, r"\b(farmacia|drogaria|droga\s*raia|drogasil|pacheco)\b", 0.95),
    ("health-medical", "health", 90, r"\b(medico|hospital|clinica|laboratorio|exame|consulta)\b", 0.9),
    ("health-gym", "health", 85, r"\b(academia|smart\s*fit|bio\s*ritmo)\b", 0.85),
    # Education
    ("education-school", "education", 90, r"\b(escola|faculdade|universidade|curso|ingles|idioma)\b", 0.9),
    ("education-books", "education", 85, r"\b(livraria|livro|amazon\s*kindle)\b", 0.8),
    # Leisure and subscriptions
    ("leisure-streaming", "leisure", 100, r"\b(netflix|spotify|disney\s*plus|amazon\s*prime|hbo|youtube\s*premium|deezer)\b", 0.95),
    ("leisure-apple", "leisure", 95, r"\b(app\s*store|apple\s*com|itunes)\b", 0.9),
    ("leisure-google", "leisure", 95, r"\b(google\s*play|google\s*one)\b", 0.9),
    ("leisure-cinema", "leisure", 85, r"\b(cinema|cinepolis|kinoplex|movie)\b", 0.85),
    ("leisure-bar", "leisure", 80, r"\b(bar|pub|cervejaria)\b", 0.75),
    # Shopping
    ("shopping-amazon", "shopping", 95, r"\b(amazon|mercado\s*livre|magazine\s*luiza)\b", 0.9),
    ("shopping-clothes", "shopping", 85, r"\b(roupa|sapato|loja|zara|renner|cea|riachuelo)\b", 0.8),
    # Fees and interest
    ("other-iof", "other", 90, r"\b(iof|tarifa|juros|anuidade|multa|taxa)\b", 0.85),
)

DEFAULT_RULES: tuple[CategoryRule, ...] = tuple(
    CategoryRule(
        id=rule_id,
        family_id=None,
        category_id=category_id,
        name=rule_id,
        match_type="regex",
        pattern=pattern,
        flags="i",
        priority=priority,
        confidence=confidence,
        is_active=True,
    )
    for rule_id, category_id, priority, pattern, confidence in _DEFAULTS
)


def builtin_rules() -> list[CategoryRule]:
    return [rule.model_copy() for rule in DEFAULT_RULES]


def apply_builtin_rules(transaction: Transaction) -> ClassificationResult | None:
    return apply_rules(transaction, DEFAULT_RULES)
