"""
Exceções levantadas durante a extração de revisões de um pacote .docx.
"""


class DocxRevisionsError(Exception):
    """Exceção base do pacote docx_revisions."""

    pass


class MalformedPackage(DocxRevisionsError):
    """O pacote não contém a parte principal do documento."""

    def __init__(self, part_name: str = "word/document.xml") -> None:
        self.part_name = part_name
        super().__init__(f"Invalid .docx file: missing {part_name}")


class ExtractionFailed(DocxRevisionsError):
    """Qualquer outra falha ao ler ou interpretar o pacote.

    Attributes:
        cause_message: Mensagem do erro original
    """

    def __init__(self, cause_message: str) -> None:
        self.cause_message = cause_message
        super().__init__(f"Failed to extract track changes: {cause_message}")
