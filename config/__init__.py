# Project configuration
