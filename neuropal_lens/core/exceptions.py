class NeuropalLensError(Exception):
    """Base exception for all neuropal_lens errors"""
    pass

class ConfigError(NeuropalLensError):
    """Invalid or inconsistent global.json or atlas config"""
    pass

class AtlasLoadError(NeuropalLensError):
    """Atlas file could not be found or read"""
    pass

class AtlasSchemaError(NeuropalLensError):
    """
    Atlas table doesn't match what NeuronAtlas expects
    missing name/x/y/z/r/g/b columns, etc
    """
    pass
