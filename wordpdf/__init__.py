"""DOCX to fixed-page PDF conversion.

Packages:
- wordpdf.docs: data model, DOCX reading, PDF emission and the conversion pipeline
- wordpdf.image: image decoding into RGB pixel buffers
- wordpdf.layout: the layout engine (wrapping, pagination, image placement)
"""
