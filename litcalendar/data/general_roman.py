# =============================================================================
# General Roman Calendar: solemnities, feasts and memorials celebrated
# throughout the Latin Church on fixed dates, plus the two moveable Marian
# memorials that follow Pentecost.
# =============================================================================

from ..constants import PrecedenceRank as R
from ..models import ObservanceDefinition, Layer, FixedDate, EasterOffset

GENERAL_ROMAN = 'general_roman'

# key, month, day, precedence
FIXED_DATES = [
    # January
    ('basil_the_great_and_gregory_nazianzen', 1, 2, R.MEMORIAL),
    ('most_holy_name_of_jesus', 1, 3, R.OPT_MEMORIAL),
    ('raymond_of_penyafort', 1, 7, R.OPT_MEMORIAL),
    ('hilary_of_poitiers', 1, 13, R.OPT_MEMORIAL),
    ('anthony_of_egypt', 1, 17, R.MEMORIAL),
    ('fabian', 1, 20, R.OPT_MEMORIAL_MARTYR),
    ('sebastian', 1, 20, R.OPT_MEMORIAL_MARTYR),
    ('agnes', 1, 21, R.MEMORIAL_MARTYR),
    ('vincent_deacon', 1, 22, R.OPT_MEMORIAL_MARTYR),
    ('francis_de_sales', 1, 24, R.MEMORIAL),
    ('conversion_of_saint_paul', 1, 25, R.FEAST_APOSTLE),
    ('timothy_and_titus', 1, 26, R.MEMORIAL),
    ('angela_merici', 1, 27, R.OPT_MEMORIAL),
    ('thomas_aquinas', 1, 28, R.MEMORIAL),
    ('john_bosco', 1, 31, R.MEMORIAL),
    # February
    ('presentation_of_the_lord', 2, 2, R.FEAST_OF_THE_LORD),
    ('blaise', 2, 3, R.OPT_MEMORIAL_MARTYR),
    ('ansgar', 2, 3, R.OPT_MEMORIAL),
    ('agatha', 2, 5, R.MEMORIAL_MARTYR),
    ('paul_miki_and_companions', 2, 6, R.MEMORIAL_MARTYR),
    ('jerome_emiliani', 2, 8, R.OPT_MEMORIAL),
    ('josephine_bakhita', 2, 8, R.OPT_MEMORIAL),
    ('scholastica', 2, 10, R.MEMORIAL),
    ('our_lady_of_lourdes', 2, 11, R.OPT_MEMORIAL),
    ('cyril_and_methodius', 2, 14, R.MEMORIAL),
    ('seven_holy_founders_of_the_servite_order', 2, 17, R.OPT_MEMORIAL),
    ('peter_damian', 2, 21, R.OPT_MEMORIAL),
    ('chair_of_saint_peter', 2, 22, R.FEAST_APOSTLE),
    ('polycarp', 2, 23, R.MEMORIAL_MARTYR),
    # March
    ('casimir', 3, 4, R.OPT_MEMORIAL),
    ('perpetua_and_felicity', 3, 7, R.MEMORIAL_MARTYR),
    ('john_of_god', 3, 8, R.OPT_MEMORIAL),
    ('frances_of_rome', 3, 9, R.OPT_MEMORIAL),
    ('patrick', 3, 17, R.OPT_MEMORIAL),
    ('cyril_of_jerusalem', 3, 18, R.OPT_MEMORIAL),
    ('joseph_spouse_of_mary', 3, 19, R.SOLEMNITY),
    ('turibius_of_mogrovejo', 3, 23, R.OPT_MEMORIAL),
    ('annunciation', 3, 25, R.SOLEMNITY),
    # April
    ('francis_of_paola', 4, 2, R.OPT_MEMORIAL),
    ('isidore', 4, 4, R.OPT_MEMORIAL),
    ('vincent_ferrer', 4, 5, R.OPT_MEMORIAL),
    ('john_baptist_de_la_salle', 4, 7, R.MEMORIAL),
    ('stanislaus', 4, 11, R.MEMORIAL_MARTYR),
    ('martin_i', 4, 13, R.OPT_MEMORIAL_MARTYR),
    ('anselm_of_canterbury', 4, 21, R.OPT_MEMORIAL),
    ('george', 4, 23, R.OPT_MEMORIAL_MARTYR),
    ('adalbert', 4, 23, R.OPT_MEMORIAL_MARTYR),
    ('fidelis_of_sigmaringen', 4, 24, R.OPT_MEMORIAL_MARTYR),
    ('mark', 4, 25, R.FEAST),
    ('peter_chanel', 4, 28, R.OPT_MEMORIAL_MARTYR),
    ('louis_grignion_de_montfort', 4, 28, R.OPT_MEMORIAL),
    ('catherine_of_siena', 4, 29, R.MEMORIAL),
    ('pius_v', 4, 30, R.OPT_MEMORIAL),
    # May
    ('joseph_the_worker', 5, 1, R.OPT_MEMORIAL),
    ('athanasius', 5, 2, R.MEMORIAL),
    ('philip_and_james', 5, 3, R.FEAST_APOSTLE),
    ('nereus_and_achilleus', 5, 12, R.OPT_MEMORIAL_MARTYR),
    ('pancras', 5, 12, R.OPT_MEMORIAL_MARTYR),
    ('our_lady_of_fatima', 5, 13, R.OPT_MEMORIAL),
    ('matthias', 5, 14, R.FEAST_APOSTLE),
    ('john_i', 5, 18, R.OPT_MEMORIAL_MARTYR),
    ('bernardine_of_siena', 5, 20, R.OPT_MEMORIAL),
    ('christopher_magallanes_and_companions', 5, 21, R.OPT_MEMORIAL_MARTYR),
    ('rita_of_cascia', 5, 22, R.OPT_MEMORIAL),
    ('bede_the_venerable', 5, 25, R.OPT_MEMORIAL),
    ('gregory_vii', 5, 25, R.OPT_MEMORIAL),
    ('mary_magdalene_de_pazzi', 5, 25, R.OPT_MEMORIAL),
    ('philip_neri', 5, 26, R.MEMORIAL),
    ('augustine_of_canterbury', 5, 27, R.OPT_MEMORIAL),
    ('paul_vi', 5, 29, R.OPT_MEMORIAL),
    ('visitation_of_mary', 5, 31, R.FEAST),
    # June
    ('justin_martyr', 6, 1, R.MEMORIAL_MARTYR),
    ('marcellinus_and_peter', 6, 2, R.OPT_MEMORIAL_MARTYR),
    ('charles_lwanga_and_companions', 6, 3, R.MEMORIAL_MARTYR),
    ('boniface', 6, 5, R.MEMORIAL_MARTYR),
    ('norbert', 6, 6, R.OPT_MEMORIAL),
    ('ephrem', 6, 9, R.OPT_MEMORIAL),
    ('barnabas', 6, 11, R.MEMORIAL),
    ('anthony_of_padua', 6, 13, R.MEMORIAL),
    ('romuald', 6, 19, R.OPT_MEMORIAL),
    ('aloysius_gonzaga', 6, 21, R.MEMORIAL),
    ('paulinus_of_nola', 6, 22, R.OPT_MEMORIAL),
    ('john_fisher_and_thomas_more', 6, 22, R.OPT_MEMORIAL_MARTYR),
    ('nativity_of_john_the_baptist', 6, 24, R.SOLEMNITY),
    ('cyril_of_alexandria', 6, 27, R.OPT_MEMORIAL),
    ('irenaeus', 6, 28, R.MEMORIAL_MARTYR),
    ('peter_and_paul', 6, 29, R.SOLEMNITY),
    ('first_martyrs_of_the_church_of_rome', 6, 30, R.OPT_MEMORIAL_MARTYR),
    # July
    ('thomas_apostle', 7, 3, R.FEAST_APOSTLE),
    ('elizabeth_of_portugal', 7, 4, R.OPT_MEMORIAL),
    ('anthony_zaccaria', 7, 5, R.OPT_MEMORIAL),
    ('maria_goretti', 7, 6, R.OPT_MEMORIAL_MARTYR),
    ('augustine_zhao_rong_and_companions', 7, 9, R.OPT_MEMORIAL_MARTYR),
    ('benedict', 7, 11, R.MEMORIAL),
    ('henry', 7, 13, R.OPT_MEMORIAL),
    ('camillus_de_lellis', 7, 14, R.OPT_MEMORIAL),
    ('bonaventure', 7, 15, R.MEMORIAL),
    ('our_lady_of_mount_carmel', 7, 16, R.OPT_MEMORIAL),
    ('apollinaris', 7, 20, R.OPT_MEMORIAL_MARTYR),
    ('lawrence_of_brindisi', 7, 21, R.OPT_MEMORIAL),
    ('mary_magdalene', 7, 22, R.FEAST),
    ('bridget', 7, 23, R.OPT_MEMORIAL),
    ('sharbel_makhluf', 7, 24, R.OPT_MEMORIAL),
    ('james_apostle', 7, 25, R.FEAST_APOSTLE),
    ('joachim_and_anne', 7, 26, R.MEMORIAL),
    ('martha_mary_and_lazarus', 7, 29, R.MEMORIAL),
    ('peter_chrysologus', 7, 30, R.OPT_MEMORIAL),
    ('ignatius_of_loyola', 7, 31, R.MEMORIAL),
    # August
    ('alphonsus_maria_de_liguori', 8, 1, R.MEMORIAL),
    ('eusebius_of_vercelli', 8, 2, R.OPT_MEMORIAL),
    ('peter_julian_eymard', 8, 2, R.OPT_MEMORIAL),
    ('john_mary_vianney', 8, 4, R.MEMORIAL),
    ('dedication_of_the_basilica_of_saint_mary_major', 8, 5, R.OPT_MEMORIAL),
    ('transfiguration', 8, 6, R.FEAST_OF_THE_LORD),
    ('sixtus_ii_and_companions', 8, 7, R.OPT_MEMORIAL_MARTYR),
    ('cajetan', 8, 7, R.OPT_MEMORIAL),
    ('dominic', 8, 8, R.MEMORIAL),
    ('teresa_benedicta_of_the_cross', 8, 9, R.OPT_MEMORIAL_MARTYR),
    ('lawrence', 8, 10, R.FEAST_MARTYR),
    ('clare', 8, 11, R.MEMORIAL),
    ('jane_frances_de_chantal', 8, 12, R.OPT_MEMORIAL),
    ('pontian_and_hippolytus', 8, 13, R.OPT_MEMORIAL_MARTYR),
    ('maximilian_mary_kolbe', 8, 14, R.MEMORIAL_MARTYR),
    ('assumption', 8, 15, R.SOLEMNITY),
    ('stephen_of_hungary', 8, 16, R.OPT_MEMORIAL),
    ('john_eudes', 8, 19, R.OPT_MEMORIAL),
    ('bernard_of_clairvaux', 8, 20, R.MEMORIAL),
    ('pius_x', 8, 21, R.MEMORIAL),
    ('queenship_of_mary', 8, 22, R.MEMORIAL),
    ('rose_of_lima', 8, 23, R.OPT_MEMORIAL),
    ('bartholomew', 8, 24, R.FEAST_APOSTLE),
    ('louis', 8, 25, R.OPT_MEMORIAL),
    ('joseph_calasanz', 8, 25, R.OPT_MEMORIAL),
    ('monica', 8, 27, R.MEMORIAL),
    ('augustine_of_hippo', 8, 28, R.MEMORIAL),
    ('passion_of_saint_john_the_baptist', 8, 29, R.MEMORIAL_MARTYR),
    # September
    ('gregory_the_great', 9, 3, R.MEMORIAL),
    ('nativity_of_mary', 9, 8, R.FEAST),
    ('peter_claver', 9, 9, R.OPT_MEMORIAL),
    ('most_holy_name_of_mary', 9, 12, R.OPT_MEMORIAL),
    ('john_chrysostom', 9, 13, R.MEMORIAL),
    ('exaltation_of_the_holy_cross', 9, 14, R.FEAST_OF_THE_LORD),
    ('our_lady_of_sorrows', 9, 15, R.MEMORIAL),
    ('cornelius_and_cyprian', 9, 16, R.MEMORIAL_MARTYR),
    ('robert_bellarmine', 9, 17, R.OPT_MEMORIAL),
    ('januarius', 9, 19, R.OPT_MEMORIAL_MARTYR),
    ('andrew_kim_tae_gon_paul_chong_ha_sang_and_companions', 9, 20, R.MEMORIAL_MARTYR),
    ('matthew_apostle', 9, 21, R.FEAST_APOSTLE),
    ('pius_of_pietrelcina', 9, 23, R.MEMORIAL),
    ('cosmas_and_damian', 9, 26, R.OPT_MEMORIAL_MARTYR),
    ('vincent_de_paul', 9, 27, R.MEMORIAL),
    ('wenceslaus', 9, 28, R.OPT_MEMORIAL_MARTYR),
    ('lawrence_ruiz_and_companions', 9, 28, R.OPT_MEMORIAL_MARTYR),
    ('michael_gabriel_and_raphael', 9, 29, R.FEAST),
    ('jerome', 9, 30, R.MEMORIAL),
    # October
    ('therese_of_the_child_jesus', 10, 1, R.MEMORIAL),
    ('guardian_angels', 10, 2, R.MEMORIAL),
    ('francis_of_assisi', 10, 4, R.MEMORIAL),
    ('faustina_kowalska', 10, 5, R.OPT_MEMORIAL),
    ('bruno', 10, 6, R.OPT_MEMORIAL),
    ('our_lady_of_the_rosary', 10, 7, R.MEMORIAL),
    ('denis_and_companions', 10, 9, R.OPT_MEMORIAL_MARTYR),
    ('john_leonardi', 10, 9, R.OPT_MEMORIAL),
    ('john_xxiii', 10, 11, R.OPT_MEMORIAL),
    ('callistus_i', 10, 14, R.OPT_MEMORIAL_MARTYR),
    ('teresa_of_jesus', 10, 15, R.MEMORIAL),
    ('hedwig', 10, 16, R.OPT_MEMORIAL),
    ('margaret_mary_alacoque', 10, 16, R.OPT_MEMORIAL),
    ('ignatius_of_antioch', 10, 17, R.MEMORIAL_MARTYR),
    ('luke', 10, 18, R.FEAST),
    ('john_de_brebeuf_isaac_jogues_and_companions', 10, 19, R.OPT_MEMORIAL_MARTYR),
    ('paul_of_the_cross', 10, 19, R.OPT_MEMORIAL),
    ('john_paul_ii', 10, 22, R.OPT_MEMORIAL),
    ('john_of_capistrano', 10, 23, R.OPT_MEMORIAL),
    ('anthony_mary_claret', 10, 24, R.OPT_MEMORIAL),
    ('simon_and_jude', 10, 28, R.FEAST_APOSTLE),
    # November
    ('all_saints', 11, 1, R.SOLEMNITY),
    ('all_souls', 11, 2, R.FIXED_FEAST),
    ('martin_de_porres', 11, 3, R.OPT_MEMORIAL),
    ('charles_borromeo', 11, 4, R.MEMORIAL),
    ('dedication_of_the_lateran_basilica', 11, 9, R.FIXED_FEAST),
    ('leo_the_great', 11, 10, R.MEMORIAL),
    ('martin_of_tours', 11, 11, R.MEMORIAL),
    ('josaphat', 11, 12, R.MEMORIAL_MARTYR),
    ('albert_the_great', 11, 15, R.OPT_MEMORIAL),
    ('margaret_of_scotland', 11, 16, R.OPT_MEMORIAL),
    ('gertrude_the_great', 11, 16, R.OPT_MEMORIAL),
    ('elizabeth_of_hungary', 11, 17, R.MEMORIAL),
    ('dedication_of_the_basilicas_of_peter_and_paul', 11, 18, R.OPT_MEMORIAL),
    ('presentation_of_mary', 11, 21, R.MEMORIAL),
    ('cecilia', 11, 22, R.MEMORIAL_MARTYR),
    ('clement_i', 11, 23, R.OPT_MEMORIAL_MARTYR),
    ('columban', 11, 23, R.OPT_MEMORIAL),
    ('andrew_dung_lac_and_companions', 11, 24, R.MEMORIAL_MARTYR),
    ('catherine_of_alexandria', 11, 25, R.OPT_MEMORIAL_MARTYR),
    ('andrew_apostle', 11, 30, R.FEAST_APOSTLE),
    # December
    ('francis_xavier', 12, 3, R.MEMORIAL),
    ('john_damascene', 12, 4, R.OPT_MEMORIAL),
    ('nicholas', 12, 6, R.OPT_MEMORIAL),
    ('ambrose', 12, 7, R.MEMORIAL),
    ('immaculate_conception', 12, 8, R.SOLEMNITY),
    ('juan_diego_cuauhtlatoatzin', 12, 9, R.OPT_MEMORIAL),
    ('our_lady_of_loreto', 12, 10, R.OPT_MEMORIAL),
    ('damasus_i', 12, 11, R.OPT_MEMORIAL),
    ('our_lady_of_guadalupe', 12, 12, R.OPT_MEMORIAL),
    ('lucy', 12, 13, R.MEMORIAL_MARTYR),
    ('john_of_the_cross', 12, 14, R.MEMORIAL),
    ('peter_canisius', 12, 21, R.OPT_MEMORIAL),
    ('john_of_kanty', 12, 23, R.OPT_MEMORIAL),
    ('stephen_first_martyr', 12, 26, R.FEAST_MARTYR),
    ('john_apostle_and_evangelist', 12, 27, R.FEAST_APOSTLE),
    ('holy_innocents', 12, 28, R.FEAST_MARTYR),
    ('thomas_becket', 12, 29, R.OPT_MEMORIAL_MARTYR),
    ('sylvester_i', 12, 31, R.OPT_MEMORIAL),
]


def general_roman():
    """Build the General Roman Calendar layer."""
    entries = [ObservanceDefinition(key, precedence, FixedDate(month, day))
               for key, month, day, precedence in FIXED_DATES]
    entries += [
        # Monday after Pentecost
        ObservanceDefinition('mary_mother_of_the_church', R.MEMORIAL, EasterOffset(50)),
        # Saturday after the Sacred Heart
        ObservanceDefinition('immaculate_heart_of_mary', R.MEMORIAL, EasterOffset(69)),
    ]
    return Layer(GENERAL_ROMAN, tuple(entries))
