from typing import Iterator, Optional, Union

from lxml import etree

# Namespaces da WordprocessingML (transitional e strict)
NAMESPACES = {
    'w': 'http://schemas.openxmlformats.org/wordprocessingml/2006/main',
    'w_strict': 'http://purl.oclc.org/ooxml/wordprocessingml/main',
}
WORD_NAMESPACES = (NAMESPACES['w'], NAMESPACES['w_strict'])

XmlInput = Union[str, bytes, etree._Element]


def _make_parser() -> etree.XMLParser:
    # Sem resolução de entidades nem acesso à rede: o XML vem de upload.
    # Um parser por chamada, instâncias de XMLParser não são thread-safe.
    return etree.XMLParser(
        encoding='utf-8',
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
    )


def is_word_tag(elem, name: str) -> bool:
    """Verifica se o elemento é ``w:<name>`` em qualquer namespace da WordprocessingML."""
    tag = elem.tag
    if not isinstance(tag, str) or '}' not in tag:
        return False
    ns, local = tag[1:].split('}', 1)
    return local == name and ns in WORD_NAMESPACES


def parse_xml(xml: XmlInput) -> etree._Element:
    if isinstance(xml, etree._Element):
        return xml
    if isinstance(xml, str):
        xml = xml.encode('utf-8')
    return etree.fromstring(xml, parser=_make_parser())


def iter_word_elements(root: etree._Element, name: str) -> Iterator[etree._Element]:
    """Percorre os elementos ``w:<name>`` de ``root`` em ordem de documento."""
    for elem in root.iter():
        if is_word_tag(elem, name):
            yield elem


def get_attrib(elem: etree._Element, attr_name: str, default: Optional[str] = None) -> Optional[str]:
    # Atributos normalmente vêm qualificados (w:author), mas aceita sem prefixo.
    for ns in WORD_NAMESPACES:
        val = elem.get(f"{{{ns}}}{attr_name}")
        if val is not None:
            return val
    return elem.get(attr_name, default)


def _collect_text(fragment: XmlInput, name: str) -> str:
    root = parse_xml(fragment)
    return "".join(t.text or "" for t in iter_word_elements(root, name))


def extract_run_text(fragment: XmlInput) -> str:
    """Concatena o texto de todos os runs ``w:t`` do fragmento.

    Outros elementos (tabs, quebras, propriedades de run, texto deletado) nao
    contribuem. Retorna string vazia quando nao ha runs de texto.
    """
    return _collect_text(fragment, 't')


def extract_deleted_text(fragment: XmlInput) -> str:
    """Igual a :func:`extract_run_text`, mas sobre os runs ``w:delText``."""
    return _collect_text(fragment, 'delText')
