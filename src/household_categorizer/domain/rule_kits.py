"""
Per-category rule kits used to seed the global rule set.

Each kit holds at least ``MIN_PATTERNS_PER_KIT`` ``contains`` rules. Base
terms are strong signals (priority 80, confidence 0.9); when a kit is short,
it is padded with the base terms followed by common statement suffixes
(priority 70, confidence 0.85, still at the auto-apply threshold).
"""

from dataclasses import dataclass

from household_categorizer.domain.text import fold_text
from household_categorizer.models import CategoryRule

MIN_PATTERNS_PER_KIT = 100

BASE_PRIORITY = 80
BASE_CONFIDENCE = 0.9
VARIANT_PRIORITY = 70
VARIANT_CONFIDENCE = 0.85

SUFFIXES = ("", " PIX", " DEB AUT", " COMPRA", " PAGAMENTO", " ONLINE", " APP", " *", " LTDA", " S/A", " S.A.")

_FOOD_BASE = (
    "ifood", "rappi", "uber eats", "delivery", "restaurante", "lanchonete", "lanche", "padaria", "açougue", "acougue",
    "supermercado", "mercado", "hortifruti", "atacadao", "atacadão", "feira", "almoço", "almoco", "jantar", "café", "cafe",
    "confeitaria", "pizzaria", "hamburgueria", "mcdonalds", "mc donalds", "burger king", "subway", "habibs", "giraffas",
    "outback", "spoleto", "sukiya", "kfc", "tacobell", "dominos", "papa johns", "pizzaria", "sorveteria", "açaí", "acai",
    "bobs", "nagumo", "sushi", "japonês", "japones", "china in box", "giraffas", "madero", "coco bambu", "pé de feijão",
    "pao de acucar", "pao de açúcar", "carrefour", "extra", "atacadão", "assai", "sonda", "super nosso", "bh", "savegnago",
    "prezunic", "super mercado", "mercado central", "sacolão", "sacolao", "quitanda", "bar do zé", "bar do ze",
    "casa do pao", "casa do pão", "bread", "bakery", "food", "alimentacao", "alimentação", "comida", "refeicao", "refeição",
    "delivery refeicao", "i food", "rapp i", "uber eats", "aiqfome", "ze delivery", "zé delivery", "didi food",
    "loggi food", "99 food", "cobasi pet", "pet food", "ração", "racao",
)

_TRANSPORT_BASE = (
    "uber", "99", "99 pop", "99 app", "in driver", "indriver", "cabify", "taxi", "táxi", "taxi",
    "posto", "gasolina", "combustivel", "combustível", "shell", "ipiranga", "br distribuidora", "ale", "raizen",
    "vibra", "petrobras", "petrobrás", "estacionamento", "sem parar", "semparar", "parking", "pedagio", "pedágio",
    "conectcar", "estapar", "waze", "google maps", "onibus", "ônibus", "metro", "metrô", "trem", "cpfl",
    "bilhete unico", "bilhete único", "bom", "sptrans", "metro sp", "viação", "viacao", "expresso", "cometa",
    "util", "viação util", "gontijo", "1001", "real", "autoviacao", "auto viação", "passagem", "rodoviaria",
    "blablacar", "carro", "moto", "ipva", "seguro auto", "licenciamento", "detran", "multa transito", "multa trânsito",
    "uber trip", "uber viagem", "uber eats", "99 corrida", "99 corridas", "cabify", "lyft",
)

_BILLS_BASE = (
    "luz", "energia", "eletricidade", "enel", "cpfl", "cemig", "neoenergia", "equatorial", "taesa",
    "agua", "água", "sabesp", "sanepar", "copasa", "caesa", "cagece", "embasa", "concessionaria agua",
    "gas", "gás", "comgas", "comgás", "ultragaz", "supergas", "liquigás", "liquigas",
    "internet", "banda larga", "net virtua", "oi fibra", "vivo fibra", "claro internet", "tim fibra", "algar",
    "telefone", "celular", "vivo", "claro", "tim", "oi", "algar telecom", "operadora",
    "aluguel", "condominio", "condomínio", "iptu", "iptu", "prefeitura", "imposto predial",
    "netflix", "spotify", "disney", "prime", "hbo", "youtube premium", "deezer", "apple music", "google one",
    "assinatura", "mensalidade", "conta de luz", "conta de agua", "conta de gas", "conta telefone",
    "recurso agua", "recurso luz", "multa conta", "juros conta", "pacote servicos", "pacote serviços",
    "nubank", "itau", "itaú", "bradesco", "santander", "anuidade cartao", "anuidade cartão", "tarifa banco",
    "conta corrente", "pacote", "tarifa mensal", "taxa manutencao", "taxa manutenção",
)

_HEALTH_BASE = (
    "farmacia", "farmácia", "drogaria", "drogasil", "droga raia", "droga sil", "pacheco", "pague menos",
    "ultrafarma", "sao paulo", "drogarias", "farmadel", "popular", "medicamento", "remedio", "remédio",
    "medico", "médico", "consulta", "exame", "laboratorio", "laboratório", "hospital", "clinica", "clínica",
    "dentista", "odontologia", "plano de saude", "plano de saúde", "unimed", "amil", "bradesco saude",
    "sulamerica", "sul américa", "hapvida", "notre dame", "prevent senior", "saude caixa",
    "academia", "smart fit", "bio ritmo", "bio ritmo", "bodytech", "fitness", "gym", "personal",
    "psicologo", "psicólogo", "terapia", "fisioterapia", "fonoaudiologia", "nutricionista", "nutrição",
    "ótico", "otico", "lente", "oculos", "óculos", "optica", "óptica", "vacina", "posto saude",
    "ubs", "upa", "samu", "emergencia", "emergência", "pronto socorro", "maternidade",
)

_EDUCATION_BASE = (
    "escola", "faculdade", "universidade", "curso", "livro", "livraria", "material escolar", "mensalidade escolar",
    "apostila", "udemy", "alura", "ingles", "inglês", "idioma", "cursinho", "pre vestibular", "pré vestibular",
    "senac", "senai", "espro", "kumon", "wizard", "cna", "fisk", "cel Lep", "yazigi", "ccaa",
    "puc", "usp", "unicamp", "ufmg", "ufrj", "unesp", "faculdade", "graduacao", "graduação", "pos graduacao",
    "mba", "especializacao", "especialização", "mestrado", "doutorado", "enem", "vestibular",
    "amazon kindle", "kindle", "saraiva", "livraria cultura", "leitura", "biblioteca", "xerox", "copia",
    "papelaria", "papelaria", "caneta", "caderno", "mochila", "uniforme escolar", "transporte escolar",
)

_SHOPPING_BASE = (
    "amazon", "mercado livre", "magazine luiza", "magalu", "americanas", "submarino", "shoptime",
    "shein", "aliexpress", "shopee", "wish", "casas bahia", "ponto frio", "extra", "carrefour",
    "loja", "shopping", "centro comercial", "roupa", "vestuario", "vestuário", "sapato", "calcado",
    "zara", "renner", "cea", "riachuelo", "marisa", "c&a", "leader", "camicado", "colombo",
    "fast shop", "kabum", "pichau", "terabyte", "informatica", "informática", "eletronico", "eletrônico",
    "celular", "smartphone", "iphone", "samsung", "xiaomi", "motorola", "lg", "positivo",
    "presente", "presente", "brinquedo", "toys", "decoração", "decoracao", "moveis", "móveis",
    "posto", "posto de gasolina", "posto shell", "posto ipiranga", "combustivel", "gasolina",
    "mercado", "supermercado", "atacado", "atacadão", "assai", "atacadao",
)

_LEISURE_BASE = (
    "netflix", "spotify", "disney", "disney plus", "hbo", "hbo max", "prime video", "amazon prime",
    "youtube premium", "deezer", "apple music", "apple tv", "paramount", "star+", "globoplay",
    "cinema", "cinépolis", "cinemapolis", "kinoplex", "movie", "filme", "ingresso", "ingressos",
    "show", "teatro", "evento", "festival", "live", "streaming", "assinatura streaming",
    "viagem", "hotel", "airbnb", "booking", "decolar", "cvc", "latam", "gol", "azul",
    "bar", "pub", "cervejaria", "restaurante", "balada", "festa", "boate", "casino",
    "jogo", "game", "steam", "playstation", "xbox", "nintendo", "ea", "epic games",
    "uber", "99", "ifood", "rappi", "delivery", "i food", "uber eats",
)

_OTHER_BASE = (
    "iof", "tarifa", "juros", "multa", "anuidade", "encargo", "pacote servicos", "pacote serviços",
    "taxa", "taxa de", "tarifa bancaria", "tarifa bancária", "manutencao", "manutenção",
    "pix enviado", "pix recebido", "ted", "doc", "transferencia", "transferência",
    "pagamento", "debito automatico", "débito automático", "deb aut", "compra cartao", "compra cartão",
    "saque", "saque atm", "saque caixa", "boleto", "pagamento boleto", "referencia", "referência",
    "pf ", "pj ", "id ", "nr ", "ref ", "aut ", "pag ", "valor ", "parc ", "parcela",
    "estorno", "devolucao", "devolução", "reembolso", "ajuste", "correção", "correcao",
    "rendimento", "dividendo", "dividendo", "juros sobre", "aplicacao", "aplicação",
    "investimento", "tesouro", "cdb", "lci", "lca", "fundos", "acoes", "ações",
)


@dataclass(frozen=True)
class Kit:
    category_id: str
    rules: tuple[CategoryRule, ...]

    @property
    def patterns(self) -> list[str]:
        return [rule.pattern for rule in self.rules]


def expand_base(
    category_id: str, base: tuple[str, ...], min_total: int, limit: int
) -> tuple[CategoryRule, ...]:
    """Build kit rules from base terms, padding with suffixed variants up to ``min_total``."""
    entries: list[tuple[str, int, float]] = []
    added: set[str] = set()

    for term in base:
        pattern = term.upper().strip()
        if pattern not in added:
            added.add(pattern)
            entries.append((pattern, BASE_PRIORITY, BASE_CONFIDENCE))

    for term in base:
        if len(entries) >= min_total:
            break
        upper = term.upper().strip()
        for suffix in SUFFIXES:
            pattern = upper + suffix
            if len(pattern) > 2 and pattern not in added:
                added.add(pattern)
                entries.append((pattern, VARIANT_PRIORITY, VARIANT_CONFIDENCE))
                if len(entries) >= min_total:
                    break

    return tuple(
        CategoryRule(
            id=f"kit-{category_id}-{index:03d}",
            family_id=None,
            category_id=category_id,
            name=pattern,
            match_type="contains",
            pattern=pattern,
            flags=None,
            priority=priority,
            confidence=confidence,
            is_active=True,
        )
        for index, (pattern, priority, confidence) in enumerate(entries[:limit])
    )


KITS: dict[str, Kit] = {
    category_id: Kit(category_id, expand_base(category_id, base, MIN_PATTERNS_PER_KIT, limit))
    for category_id, base, limit in (
        ("food", _FOOD_BASE, 120),
        ("transport", _TRANSPORT_BASE, 110),
        ("bills", _BILLS_BASE, 115),
        ("health", _HEALTH_BASE, 110),
        ("education", _EDUCATION_BASE, 105),
        ("shopping", _SHOPPING_BASE, 110),
        ("leisure", _LEISURE_BASE, 105),
        ("other", _OTHER_BASE, 110),
    )
}

# Checked in order; the first kit whose keyword appears in the name wins.
_CATEGORY_NAME_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("food", ("aliment", "mercad", "restaur", "comida", "food", "padaria", "lanche", "delivery", "ifood")),
    ("transport", ("transporte", "transport", "uber", "posto", "gasolina", "estacionamento", "pedagio")),
    ("bills", ("conta", "fixa", "bills", "luz", "agua", "internet", "aluguel", "condominio", "telefone")),
    ("health", ("saude", "health", "farmacia", "medico", "academia")),
    ("education", ("educac", "education", "escola", "curso", "livro", "faculdade")),
    ("shopping", ("compra", "shopping", "loja", "vestuario", "roupa", "amazon", "mercado livre")),
    ("leisure", ("lazer", "leisure", "cinema", "netflix", "streaming", "viagem", "hotel")),
    ("other", ("outro", "other", "diversos")),
)


def infer_kit(category_name_or_slug: str) -> Kit:
    """
    Map a category slug or display name (``"Alimentação"``, ``"Contas Fixas"``)
    to its kit. Unknown names get the ``other`` kit.
    """
    norm = fold_text(category_name_or_slug)
    slug = norm.replace(" ", "_")
    if slug in KITS:
        return KITS[slug]
    for category_id, keywords in _CATEGORY_NAME_KEYWORDS:
        if any(keyword in norm for keyword in keywords):
            return KITS[category_id]
    return KITS["other"]


def get_all_kits() -> list[Kit]:
    return list(KITS.values())


def all_kit_rules() -> list[CategoryRule]:
    return [rule.model_copy() for kit in KITS.values() for rule in kit.rules]


def ensure_min_patterns_per_kit(min_count: int) -> None:
    for kit in KITS.values():
        if len(kit.rules) < min_count:
            raise ValueError(
                f"Kit {kit.category_id} has {len(kit.rules)} patterns, expected >= {min_count}"
            )
