"""NiceGUI interface - thin visualization layer over the interaction controller.

Responsibilities:
    - Chat list sidebar with create and delete
    - Message log with typing indicator while a send is in flight
    - Bucket file panel with downloads
    - Title and PDF upload dialogs

Contains no sequencing logic. Every event is forwarded to the controller.
"""
