"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents at paragraph, line, and word boundaries, falling back to a
hard character cut, so no chunk exceeds the configured size.

Dependencies: langchain_text_splitters, langchain_core
System role: Second stage of the chunking pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from doc_chatbot.models import Chunk, generate_chunk_id


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 2000,
        chunk_overlap: int = 0,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When chunk_overlap is larger than chunk_size
        """
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Chunked documents with source metadata and start_index

        Raises:
            ValueError: When documents list is empty
        """
        if not documents:
            raise ValueError("No documents to chunk")

        return self._splitter.split_documents(documents)

    def to_chunks(self, documents: list[Document]) -> list[Chunk]:
        """
        Split documents and convert the pieces to Chunk models.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Chunk]: Chunks in document order with deterministic IDs
        """
        return [
            Chunk(
                id=generate_chunk_id(doc.page_content, doc.metadata),
                content=doc.page_content,
                metadata=doc.metadata,
            )
            for doc in self.chunk(documents)
        ]
