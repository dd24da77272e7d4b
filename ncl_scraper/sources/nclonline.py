"""NCL (National Chemical Laboratories) product pages carrying SDS and flyer PDFs."""

from typing import List

from .base import BaseSource

VIEW_PATH = "/products/view/"


class NCLOnlineSource(BaseSource):
    name = "nclonline"

    INDEX_PATHS = [
        "/products/sds_alpha",
        "/products/flyer_alpha.php",
    ]

    # Slugs under /products/view/, chemicals first, then equipment
    PRODUCT_SLUGS = [
        "15_COCONUT_OIL",
        "24_7_",
        "Afia_ALCOHOL_BASED",
        "Afia_Alcohol_Free",
        "Afia_Anti_Bacterial",
        "Afia_Earth_Sense_Certified_Green_Foaming",
        "Afia_Foaming_E2",
        "Afia_Foaming_Hair_and_Body_Wash",
        "Afia_Harvest_Melon",
        "Afia_Hypoallergenic_Certified",
        "Afia_Ocean_Mist",
        "Afia_Spring_Blossom",
        "ALL_IN_ONE_",
        "ALL_OFF_",
        "ASAP",
        "ASTRO_CHEM_",
        "AUTO_KLEEN_",
        "AVISTAT_D_",
        "BALANCE_",
        "BARE_BONES_",
        "BARE_BONES_LOW_ODOR",
        "BATHROOM_PLUS_",
        "BIG_PUNCH",
        "BLUE_VELVET_",
        "BOLT_",
        "BRITE_EYES_",
        "BULLSEYE_",
        "BURST_PLUS_",
        "C_ALL_",
        "CHEM_EEZ_",
        "CITRI_SCRUB_",
        "CITROL",
        "CITRUS_FLOWER_QUAT",
        "CITRUS_KLEEN",
        "CleanSMART_Foaming_Degreaser_Cleaner_SC",
        "CleanSMART_Pot_Pan_Detergent_SC",
        "CleanSMART_Sanitizer_1_512",
        "COMBAT_",
        "COMMAND_",
        "CONKLEEN_204_",
        "CORRAL_",
        "CREAM_COAT_",
        "CYCLONE_",
        "DECADE_",
        "DEO_PINE_",
        "DESCUM",
        "DUAL_BLEND_1",
        "DUAL_BLEND_10",
        "DUAL_BLEND_11",
        "DUAL_BLEND_17",
        "DUAL_BLEND_19",
        "DUAL_BLEND_2",
        "DUAL_BLEND_20",
        "DUAL_BLEND_21",
        "DUAL_BLEND_22",
        "DUAL_BLEND_23",
        "DUAL_BLEND_24",
        "DUAL_BLEND_25",
        "DUAL_BLEND_26",
        "DUAL_BLEND_3",
        "DUAL_BLEND_4",
        "DUAL_BLEND_5",
        "DUAL_BLEND_6",
        "DUAL_BLEND_7",
        "DUAL_BLEND_8",
        "DUAL_BLEND_9",
        "DURA_GLOSS_",
        "EARTH_SENSE_ASPIRE_",
        "EARTH_SENSE_Certified_Foaming_Hand_Cleaner",
        "EARTH_SENSE_Certified_Liquid_Hand_Cleaner",
        "EARTH_SENSE_Degreaser_Cleaner",
        "EARTH_SENSE_EVERGREEN_FINISH",
        "EARTH_SENSE_Extra_Heavy_Duty_RTU",
        "EARTH_SENSE_Foam_Safe",
        "EARTH_SENSE_GREEN_IMPACT_",
        "EARTH_SENSE_HD_WASHROOM_CLEANER",
        "EARTH_SENSE_Multi_Purpose_Neutral_Cleaner",
        "EARTH_SENSE_Multi_Surface_Concentrate_with_H2O2",
        "EARTH_SENSE_NEUTRAL_FLOOR_CLEANER",
        "EARTH_SENSE_RTU_GLASS_HARD_SURFACE_CLEANER",
        "EASY_DAB_",
        "ECO_SOLV",
        "EDGE_PLUS_",
        "ENDURE_",
        "ENHANCE_",
        "ENSEEL_",
        "ES_Neutral_Disinfectant_Detergent",
        "ETERNITY_",
        "ETERNITY_Aerosol_",
        "EXPOSE_",
        "EXTREME_PLUS_",
        "FLEXI_CLEAN",
        "FLEXI_SHEEN_",
        "FOAM_SAFE_OCEAN_MIST",
        "FOAM_BREAK_",
        "FORTRESS",
        "FRESH_START_",
        "GLIMMER_",
        "GOLDEN_POT_PAN",
        "GREEN_EMERALD",
        "HOMBRE_",
        "HURRAH_CAR_WASH",
        "HURRICANE_",
        "IMAGE_",
        "IMPRESSIONS_",
        "INCREDILOSO_",
        "INCREDILOSO_Lavender",
        "INVINCIBLE_",
        "KITCHEN_MATE",
        "KLEER_BRITE_",
        "LAVENDER_QUAT",
        "LEMON_QUAT",
        "LUSTER",
        "LVT_CLEAN",
        "LVT_PROTECT",
        "MAGIC_BREEZE_Herbal",
        "MAGIC_BREEZE_Lavender",
        "MAIN_SQUEEZE_CLEANER",
        "MAIN_SQUEEZE_DEGREASER",
        "MAIN_SQUEEZE_GLASS",
        "MAIN_SQUEEZE_Lavender_256",
        "MARVEL",
        "MATTE",
        "MICRO_CHEM_PLUS_",
        "MINT_QUAT",
        "MIRAGE",
        "MOLD_AWAY_",
        "MRP_",
        "MULTI_STAT_",
        "NATURAL_MIRACLE_",
        "NATURE_S_FORCE",
        "NATURE_S_POWER",
        "NATURE_S_SOLUTION_",
        "NCL_2_",
        "NCLwipes_Lemon_Fresh",
        "NCLwipes_Waterfall_Fresh",
        "NEUTRA_CIDE_256",
        "NEUTRAL_Q_",
        "NEXT_CENTURY_",
        "NEXT_STEP_",
        "NO_ZAP_STATIC_DISSIPATIVE_FLOOR_COATING",
        "NU_HIDE_",
        "NU_LOOK",
        "ONE_COAT_25_",
        "ONE_STEP_",
        "ONE_",
        "PATINA_",
        "PERFECTION_",
        "pH_ENOMENAL_",
        "PICTURE_PERFECT_",
        "PINE_QUAT_PLUS_",
        "PINK_LOTION",
        "PINK_N_CREAMY",
        "PINK_SUDS",
        "PIZZAZZ_",
        "POOFF_",
        "POP_SHINE_",
        "POP_SHINE_RTU",
        "PRO_SEEL_",
        "ProLEX_CDL_520",
        "ProLEX_HTR_260",
        "ProLEX_LTD_220",
        "ProLEX_LTR_250",
        "QWIK_SCRUB_",
        "RELY",
        "RINSE_AWAY_PLUS_",
        "ROAD_AWAY",
        "ROCK_HARD_",
        "RUFF_N_READY",
        "SANIQUAT",
        "SEA_BRITE_",
        "SHA_ZYME_",
        "SHA_ZYME_DRC",
        "SHA_ZYME_RTU",
        "SHIELD",
        "SOFT_N_CREAMY",
        "SPIT_SHINE_",
        "SPRAY_KLEEN_PLUS_",
        "SPRITZ_",
        "STAMINA_",
        "STONE_BEAUTY_",
        "STONE_KLEEN_",
        "SUN_SPRAY",
        "SUPER_CHERRY",
        "SUPER_NAC_",
        "SUPER_PURGE",
        "SUPER_SONIC_",
        "SURFACE_BARRIER_",
        "SURFACE_PREP_",
        "SURGE_",
        "TANNIN_OUT_",
        "TOTAL_",
        "TRIGGER_",
        "TWISTER_",
        "ULTRAMAX_",
        "UPPER_HAND_",
        "VIGOR_",
        "VISIONS_",
        "VIVID_",
        "WASH_BRITE_",
        "WHITE_PEARL",
        "WITHSTAND_",
        "WORLD_CLASS_",
        "WRANGLER_",
        "ZooooM_",
        "Afia_Drip_Tray",
        "Afia_Floor_Dispenser_Stand_White",
        "Afia_Manual_Dispenser",
        "Afia_Touch_Free",
        "CleanSMART_Foam_Dispensing_Unit",
        "CleanSMART_Sink_Dispensing_Unit",
        "DUAL_BLEND_Jr_",
        "DUAL_BLEND_PORTABLE",
        "DUAL_BLEND_PORTABLE_KIT",
        "DUAL_BLEND_WALL",
        "ECONO_DIAMONDS",
        "FOAM_MAGIC",
        "GRANITE_MASTER_",
        "HANDI_RACK_Round_Gallon_",
        "INDUSTRIAL_HAND_SOAP_DISPENSER",
        "LUMINAIRE_",
        "MECHANICS_SELECT_HAND_CARE_PUMP",
        "NAT_SPEED_",
        "NAT_SPLASH_GUARD",
        "NAT_STONE_Pad_Driver",
        "Pak_SMART_Cap",
        "PRO_SERIES_STONE_BLAZER_",
        "Refillable_Foaming_Hand_Cleaner_Dispener_Cartridge",
        "RSC_Foaming_Nozzle",
        "STONE_BLAZER_",
        "UNI_POWER_",
        "WET_CONCRETE_DIAMONDS",
    ]

    def seed_urls(self) -> List[str]:
        base = self.base_url.rstrip("/")
        paths = self.INDEX_PATHS + [VIEW_PATH + slug for slug in self.PRODUCT_SLUGS]
        return [base + path for path in paths]
