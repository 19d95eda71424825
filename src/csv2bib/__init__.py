"""IEEE Xplore CSV export to BibTeX/RIS conversion."""
